#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Interactive menu over one unlocked store"""

import logging

from lockbox.constants import ALLOWED_LENGTHS, DEFAULT_LENGTH
from lockbox.credentials import format_entry
from lockbox.generator import calculate_password_strength, generate_password
from lockbox.utils import confirm_new_master, get_validated_input, optional_username

logger = logging.getLogger(__name__)

MENU_OPTIONS = ['1', '2', '3', '4', '5', '6', '7']


def run_repl(store, prompt):
    """
    Run an interactive menu until the user exits

    Every change is written to disk before the menu is shown again.

    Args:
        store: UnlockedStore to work on
        prompt: Object providing prompt_password and read_line
    """
    while True:
        print("\n=== Lockbox ===")
        print(f"Store: {store.file_path}")
        print("1. Add a password")
        print("2. Generate a password")
        print("3. Show a password")
        print("4. List passwords")
        print("5. Remove a password")
        print("6. Update master password")
        print("7. Exit")

        choice = get_validated_input(
            "\nChoose an option (1-7): ",
            prompt,
            valid_options=MENU_OPTIONS,
            allow_back=False,
        )
        logger.debug(f"Menu option selected: {choice}")

        if choice == '1':
            _handle_add_password(store, prompt)
        elif choice == '2':
            _handle_generate_password(store, prompt)
        elif choice == '3':
            _handle_show_password(store, prompt)
        elif choice == '4':
            _handle_list_passwords(store, prompt)
        elif choice == '5':
            _handle_remove_password(store, prompt)
        elif choice == '6':
            _handle_update_master(store, prompt)
        elif choice == '7':
            print("Exiting Lockbox.")
            break


def _ask_service_and_username(prompt):
    """Return (service, username) or None if the user went back"""
    service = get_validated_input("Service name:", prompt, valid_pattern=r".+")
    if service == '_BACK_':
        return None
    username = get_validated_input("Username (Enter for none):", prompt, default="")
    if username == '_BACK_':
        return None
    return service, optional_username(username)


def _handle_add_password(store, prompt):
    """Handle add password flow with back option"""
    answer = _ask_service_and_username(prompt)
    if answer is None:
        return
    service, username = answer

    password = prompt.prompt_password("password")
    if not password:
        print("⚠️ Password cannot be empty.")
        return

    store.push(service, username, password).dump()
    print(f"✅ Password saved for {service}")


def _handle_generate_password(store, prompt):
    """Handle password generation flow, optionally saving the result"""
    length = get_validated_input(
        f"Password length ({'/'.join(str(n) for n in ALLOWED_LENGTHS)}):",
        prompt,
        valid_options=[str(n) for n in ALLOWED_LENGTHS],
        default=str(DEFAULT_LENGTH),
    )
    if length == '_BACK_':
        return

    symbols = get_validated_input("Include symbols? (y/n):", prompt, valid_options=['y', 'n'], default='y')
    if symbols == '_BACK_':
        return

    include_symbols = symbols == 'y'
    password = generate_password(length=int(length), symbols=include_symbols)
    print(f"\n🔑 Generated password: {password}")
    print(f"🔒 Strength: {calculate_password_strength(password, symbols=include_symbols)}")

    save_option = get_validated_input("Save this password? (y/n):", prompt, valid_options=['y', 'n'], default='n')
    if save_option != 'y':
        return

    answer = _ask_service_and_username(prompt)
    if answer is None:
        return
    service, username = answer
    store.push(service, username, password).dump()
    print(f"✅ Password saved for {service}")


def _handle_show_password(store, prompt):
    """Handle show password flow with back option"""
    answer = _ask_service_and_username(prompt)
    if answer is None:
        return
    service, username = answer

    entry = store.find(service, username)
    if entry is None:
        print("⚠️ Password not found")
        return
    print(f"Password: {entry.password}")


def _handle_list_passwords(store, prompt):
    """List every entry with passwords masked unless asked otherwise"""
    if not len(store):
        print("No passwords stored yet.")
        return

    reveal = get_validated_input("Show passwords? (y/n):", prompt, valid_options=['y', 'n'], default='n')
    if reveal == '_BACK_':
        return
    for entry in store:
        print(format_entry(entry, reveal == 'y'))
    print(f"\nTotal: {len(store)} passwords")


def _handle_remove_password(store, prompt):
    """Handle remove password flow with back option"""
    answer = _ask_service_and_username(prompt)
    if answer is None:
        return
    service, username = answer

    if store.pop(service, username) is None:
        print("⚠️ Password not found")
        return
    store.dump()
    print("✅ Password deleted")


def _handle_update_master(store, prompt):
    """Rotate the master password and re-encrypt the store"""
    store.update_master(confirm_new_master(prompt)).dump()
    print("✅ Master password updated")
