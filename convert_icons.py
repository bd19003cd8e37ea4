from pathlib import Path

from console_output import print_colored
from icons_js import render_icons_js, write_icons_js
from svg_icons import IconEntry, build_icon_name, extract_path_data, scan_svg_files


def convert_icon_dir(icon_dir):
    """Compile every SVG in icon_dir into custom_icons.js.

    Returns the written file, or None when the directory holds no SVGs
    (nothing is written in that case).
    """
    icon_dir = Path(icon_dir)
    svg_files = scan_svg_files(icon_dir)

    if not svg_files:
        print_colored("No svgs found.", 'yellow')
        return None

    entries = []
    for svg_file in svg_files:
        name = build_icon_name(svg_file.name)
        print(f"Processing {svg_file.name} - custom:{name}")

        result = extract_path_data(svg_file)
        if not result.ok:
            print_colored(f"{type(result.error).__name__}: {result.error}", 'red')
            print_colored(f"Error while reading file: {svg_file}", 'red')
            continue

        entries.append(IconEntry(name, result.path_data))

    out = write_icons_js(icon_dir, render_icons_js(entries))
    print(f"Wrote {out} ({len(entries)} icons).")
    return out
