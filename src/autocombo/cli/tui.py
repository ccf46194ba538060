"""Handler for 'autocombo tui' (the default command)."""

import logging

from autocombo.cli._common import load_catalog_or_die, settings_from_args


def tui(args) -> int:
    from autocombo.ui import AutocompleteApp

    if args.verbose:
        logging.basicConfig(filename="autocombo.log", level=logging.DEBUG)
    settings = settings_from_args(args)
    catalog = load_catalog_or_die(args.catalog, settings, args.json)
    app = AutocompleteApp(catalog, settings, selected_item=args.selected)
    app.run()
    if app.selection is not None:
        value, label = app.selection
        print(f"{value}  {label}")
    return 0
