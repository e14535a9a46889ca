"""Mode example for the stat-mode package"""

import os

from statmode import ModeHolder, create_mode


def main():
    # Wrap the mode of this script
    print("Reading mode of this file...")
    m = create_mode(os.stat(__file__))
    print(f"  Mode: {oct(m)}")
    print(f"  Octal: {m.to_octal()}")
    print(f"  String: {m}")
    print(f"  Is file: {m.is_file()}")
    print(f"  Is directory: {m.is_directory()}")

    # Build a mode from scratch
    print("\nBuilding a shared directory mode...")
    holder = ModeHolder()
    shared = create_mode(holder)
    shared.is_directory(True)
    shared.owner.read = shared.owner.write = shared.owner.execute = True
    shared.group.read = shared.group.write = shared.group.execute = True
    shared.others.read = shared.others.write = shared.others.execute = True
    shared.sticky = True
    print(f"  String: {shared}")
    print(f"  Octal: {shared.to_octal()}")
    print(f"  Holder: {holder}")

    # Setuid binary without owner execute
    print("\nSetuid without execute:")
    binary = create_mode(0o104644)
    print(f"  String: {binary}")
    binary.owner.execute = True
    print(f"  With execute: {binary}")


if __name__ == "__main__":
    main()
