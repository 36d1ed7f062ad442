# What it does: Manages all read/write operations for the `.git/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os
from .repository import find_repo_root, git_path

TYPE_MATCH_MODES = ('exact', 'prefix')


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return git_path(repo_root, 'config')


def read_config(repo_root=None): # Reads and returns the configuration as a ConfigParser object
    repo_root = repo_root or find_repo_root()
    config = configparser.ConfigParser()
    if not repo_root:
        return config

    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_config(key, value, repo_root=None): # Sets a configuration key to a value and writes it to the config file
    repo_root = repo_root or find_repo_root()
    if not repo_root:
        raise FileNotFoundError("Not a git repository.")

    config_path = get_config_path(repo_root)
    config = configparser.ConfigParser()
    if os.path.exists(config_path):
        config.read(config_path)

    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError("Error: Invalid key format. Should be 'section.key'.")

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(config_path, 'w') as configfile:
        config.write(configfile)


def get_type_match(repo_root): # Retrieves mktag.typematch, 'exact' unless configured otherwise
    config = read_config(repo_root)
    mode = config.get('mktag', 'typematch', fallback='exact').strip().lower()
    if mode not in TYPE_MATCH_MODES:
        raise ValueError(f"bad mktag.typematch value '{mode}' (expected one of: {', '.join(TYPE_MATCH_MODES)})")
    return mode
