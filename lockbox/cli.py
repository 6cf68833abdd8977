#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Command line interface for Lockbox"""

import argparse
import logging

from lockbox import config
from lockbox.constants import ALLOWED_LENGTHS, DEFAULT_LENGTH
from lockbox.credentials import format_entry
from lockbox.errors import LockboxError
from lockbox.generator import calculate_password_strength, generate_password, generate_passwords
from lockbox.logger import setup_logger
from lockbox.repl import run_repl
from lockbox.session import unlock_store
from lockbox.utils import TerminalPrompt, confirm_new_master

logger = logging.getLogger(__name__)


def _class_options(args):
    return {
        "symbols": args.symbols,
        "uppercase": args.uppercase,
        "lowercase": args.lowercase,
        "numbers": args.numbers,
    }


def _generator_options(args):
    return dict(_class_options(args), length=args.length)


def _not_found_message(service, username):
    message = f"Cannot find the given service {service}"
    if username is not None:
        message += f" and username {username}"
    return message


def cmd_add(args, prompt):
    store = unlock_store(args.file, prompt, args.master)

    if args.password is not None:
        password = args.password
    elif args.generate:
        password = generate_password(**_generator_options(args))
        strength = calculate_password_strength(password, **_class_options(args))
        print(f"🔒 Generated password strength: {strength}")
    else:
        password = prompt.prompt_password("password")

    store.push(args.service, args.username, password).dump()
    print("✅ Password added successfully")


def cmd_generate(args, prompt):
    for password in generate_passwords(args.count, **_generator_options(args)):
        print(password)


def cmd_list(args, prompt):
    store = unlock_store(args.file, prompt, args.master)
    if not len(store):
        print("No passwords stored yet.")
        return
    for entry in store:
        print(format_entry(entry, args.show_passwords))


def cmd_remove(args, prompt):
    store = unlock_store(args.file, prompt, args.master)
    if store.pop(args.service, args.username) is None:
        print("⚠️ Password not found")
        return
    store.dump()
    print("✅ Password deleted")


def cmd_show(args, prompt):
    store = unlock_store(args.file, prompt, args.master)
    entry = store.find(args.service, args.username)
    if entry is None:
        print(_not_found_message(args.service, args.username))
        return
    print(f"Password: {entry.password}")


def cmd_update_master(args, prompt):
    store = unlock_store(args.file, prompt, args.master)
    store.update_master(confirm_new_master(prompt)).dump()
    print("✅ Master password updated")


def cmd_repl(args, prompt):
    store = unlock_store(args.file, prompt, args.master)
    run_repl(store, prompt)


def _add_store_arguments(parser):
    parser.add_argument("-f", "--file", help="Path to the store file (or set LOCKBOX_STORE)")
    parser.add_argument("-m", "--master", help="Master password (prompted when omitted)")


def _add_generator_arguments(parser):
    parser.add_argument("-l", "--length", type=int, choices=ALLOWED_LENGTHS, default=DEFAULT_LENGTH,
                        help=f"Length of the generated password (default {DEFAULT_LENGTH})")
    parser.add_argument("--no-symbols", dest="symbols", action="store_false", help="Leave out symbols")
    parser.add_argument("--no-uppercase", dest="uppercase", action="store_false", help="Leave out uppercase letters")
    parser.add_argument("--no-lowercase", dest="lowercase", action="store_false", help="Leave out lowercase letters")
    parser.add_argument("--no-numbers", dest="numbers", action="store_false", help="Leave out digits")


def build_parser():
    parser = argparse.ArgumentParser(prog="lockbox", description="Lockbox: a password manager and generator")
    sub = parser.add_subparsers(dest="command", required=True)

    # add
    s = sub.add_parser("add", help="Add a password to the store")
    _add_store_arguments(s)
    s.add_argument("service")
    s.add_argument("-u", "--username", help="Username for the service")
    s.add_argument("-p", "--password", help="Password to store (prompted when omitted)")
    s.add_argument("-g", "--generate", action="store_true", help="Generate the password")
    _add_generator_arguments(s)
    s.set_defaults(func=cmd_add)

    # generate
    s = sub.add_parser("generate", help="Generate random passwords")
    _add_generator_arguments(s)
    s.add_argument("-c", "--count", type=int, default=1, help="How many passwords to generate")
    s.set_defaults(func=cmd_generate)

    # list
    s = sub.add_parser("list", help="List stored passwords")
    _add_store_arguments(s)
    s.add_argument("-s", "--show-passwords", action="store_true", help="Reveal the passwords")
    s.set_defaults(func=cmd_list)

    # remove
    s = sub.add_parser("remove", help="Remove a password from the store")
    _add_store_arguments(s)
    s.add_argument("service")
    s.add_argument("-u", "--username")
    s.set_defaults(func=cmd_remove)

    # show
    s = sub.add_parser("show", help="Show one stored password")
    _add_store_arguments(s)
    s.add_argument("service")
    s.add_argument("-u", "--username")
    s.set_defaults(func=cmd_show)

    # update-master
    s = sub.add_parser("update-master", help="Change the master password")
    _add_store_arguments(s)
    s.set_defaults(func=cmd_update_master)

    # repl
    s = sub.add_parser("repl", help="Start an interactive session")
    _add_store_arguments(s)
    s.set_defaults(func=cmd_repl)

    return parser


def run(args, prompt=None, log_to_file=False):
    """
    Execute a parsed command

    The store path is resolved here, once, for every store command.

    Args:
        args: Namespace from build_parser
        prompt: Object providing prompt_password and read_line
        log_to_file: Whether to log to lockbox.log next to the store

    Returns:
        Process exit code
    """
    prompt = prompt or TerminalPrompt()
    if hasattr(args, "file"):
        args.file = config.resolve_store_path(args.file)
        if log_to_file:
            setup_logger(config.resolve_log_path(args.file))

    try:
        args.func(args, prompt)
    except LockboxError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"❌ Error: {e}")
        return 1
    return 0


def main(argv=None):
    """Parse arguments, set up logging and run the command"""
    args = build_parser().parse_args(argv)
    return run(args, log_to_file=True)
