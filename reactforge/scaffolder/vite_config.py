"""Vite build configuration generation.

``generate_vite_config`` is a pure function of the tailwind flag.  The rest of
the file is fixed: five path aliases, a strict dev server on port 3000 that
opens the browser, and a production build into ``dist`` with source maps and
a single ``vendor`` chunk for everything under ``node_modules``.
"""

from __future__ import annotations

from pathlib import Path

from .templates import TemplateRenderer

VITE_CONFIG_FILENAME = "vite.config.ts"

PATH_ALIASES: dict[str, str] = {
    "@": "./src",
    "@components": "./src/components",
    "@hooks": "./src/hooks",
    "@routes": "./src/routes",
    "@lib": "./src/lib",
}

DEV_SERVER_PORT = 3000
BUILD_OUT_DIR = "dist"
VENDOR_MARKER = "node_modules"
VENDOR_CHUNK = "vendor"

TAILWIND_IMPORT = "import tailwindcss from '@tailwindcss/vite'"
TAILWIND_PLUGIN = "tailwindcss()"


def generate_vite_config(tailwind: bool, renderer: TemplateRenderer | None = None) -> str:
    """Return the content of ``vite.config.ts``.

    When *tailwind* is true the Tailwind Vite plugin is imported and
    registered after ``react()``; otherwise neither line appears.
    """
    renderer = renderer or TemplateRenderer()
    return renderer.render(
        "vite.config.ts.j2",
        {
            "tailwind": tailwind,
            "aliases": PATH_ALIASES,
            "port": DEV_SERVER_PORT,
            "out_dir": BUILD_OUT_DIR,
            "vendor_marker": VENDOR_MARKER,
            "vendor_chunk": VENDOR_CHUNK,
        },
    )


async def write_vite_config(
    project_dir: Path,
    tailwind: bool,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Overwrite ``vite.config.ts`` in *project_dir* and return its path."""
    renderer = renderer or TemplateRenderer()
    content = generate_vite_config(tailwind, renderer)
    return await renderer.write(project_dir / VITE_CONFIG_FILENAME, content)
