"""Render and write the custom_icons.js module loaded by the dashboard."""

from pathlib import Path

OUTPUT_FILENAME = "custom_icons.js"
ICONSET_KEY = "custom"
VIEWBOX = "0 0 24 24"

HEADER = "const ICON = {\n"
FOOTER = "};\n\n"

TRAILER = f'''  async function getIcon(name) {{
    return {{
      path: ICON[name],
      viewBox: "{VIEWBOX}"
    }};
  }}

  window.customIconsets = window.customIconsets || {{ }};
  window.customIconsets['{ICONSET_KEY}'] = getIcon;
'''


def render_icons_js(entries):
    # path data is embedded as-is, a "'" inside it breaks the script
    lines = [f"  {entry.name}: '{entry.path_data}'" for entry in entries]
    body = ",\n".join(lines)
    if body:
        body += "\n"
    return HEADER + body + FOOTER + TRAILER


def write_icons_js(icon_dir, text):
    out = Path(icon_dir) / OUTPUT_FILENAME
    with open(out, "w", encoding="utf-8") as f:
        f.write(text)
    return out
