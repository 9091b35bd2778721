"""Command line entry point for the People Gallery project."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import Gallery, SettingsStore
from .io.image_library import ImageImportError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="People Gallery")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Override the directory holding imported images and saved people.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--list",
        action="store_true",
        help="Print saved people as JSON and exit.",
    )
    commands.add_argument(
        "--add",
        type=Path,
        metavar="IMAGE",
        help="Import an image as a new person without launching the GUI.",
    )
    commands.add_argument(
        "--rename",
        nargs=2,
        metavar=("INDEX", "NAME"),
        help="Rename the person at INDEX without launching the GUI.",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    store = SettingsStore()
    config = store.load()
    if args.data_dir:
        config.data_directory = args.data_dir

    if not (args.list or args.add or args.rename):
        from .gui import run_app

        run_app(config)
        return

    gallery = Gallery.from_config(config)
    gallery.load()

    if args.add:
        try:
            gallery.add_image(args.add)
        except ImageImportError as exc:
            parser.error(str(exc))
    elif args.rename:
        raw_index, name = args.rename
        try:
            index = int(raw_index)
            gallery.rename(index, name)
        except (ValueError, IndexError):
            parser.error(f"No person at index {raw_index}; gallery has {len(gallery)}.")

    output = [
        {
            "index": index,
            **person.as_dict(),
            "path": str(gallery.image_path(person)),
        }
        for index, person in enumerate(gallery.people)
    ]
    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")

    if gallery.last_save is not None and not gallery.last_save.ok:
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
