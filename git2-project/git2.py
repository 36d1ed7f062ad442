import argparse
from commands import (
    init, config, mktag, hash_object, cat_file, tag
)
# The main entry point for the git2 command line
def main():
    # The main parser
    parser = argparse.ArgumentParser(prog="git2", description="Git2: git plumbing commands.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", metavar="<command>")

    # Command: init
    init_parser = subparsers.add_parser("init", help="Initialize a new, empty repository.")
    init_parser.set_defaults(func=init.run)

    # Command: mktag
    mktag_parser = subparsers.add_parser("mktag", help="Create a tag object from a signature file on stdin.",
                                         usage="git2 mktag < signaturefile")
    mktag_parser.set_defaults(func=mktag.run)

    # Command: hash-object
    hash_parser = subparsers.add_parser("hash-object", help="Compute object ID and optionally create an object from a file.")
    hash_parser.add_argument("-w", dest="write", action="store_true", help="Write the object into the object database.")
    hash_parser.add_argument("-t", dest="type", default="blob", help="Object type (default: blob).")
    hash_parser.add_argument("file", help="The file to hash.")
    hash_parser.set_defaults(func=hash_object.run)

    # Command: cat-file
    cat_parser = subparsers.add_parser("cat-file", help="Provide content or type information for an object.")
    cat_mode = cat_parser.add_mutually_exclusive_group(required=True)
    cat_mode.add_argument("-t", dest="type", action="store_true", help="Show the object type.")
    cat_mode.add_argument("-p", dest="pretty", action="store_true", help="Show the object content.")
    cat_parser.add_argument("object", help="The object to show.")
    cat_parser.set_defaults(func=cat_file.run)

    # Command: tag
    tag_list_parser = subparsers.add_parser("tag", help="List tags.")
    tag_list_parser.set_defaults(func=tag.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a configuration value (e.g. mktag.typematch).")
    config_parser.add_argument("key", help="The configuration key (e.g., mktag.typematch).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Parse the arguments
    args = parser.parse_args()

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
