#!/usr/bin/env python3
"""
Inset Template Listing Script

Prints every inset position and background template together with the
values it resolves to under the configured default size and margin.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger as log

from common import global_config
from src.services.meme.inset import (
    InsetTemplateError,
    list_templates,
    resolve_background,
    resolve_position,
)
from src.utils.logging_config import setup_logging

# Setup logging
setup_logging()


def main():
    """Log the available templates."""
    inset_config = global_config.inset
    try:
        log.info(
            f"📐 Position templates (size={inset_config.default_size}, "
            f"margin={inset_config.default_margin}):"
        )
        for name in list_templates("position"):
            record = resolve_position(
                name,
                size=inset_config.default_size,
                margin=inset_config.default_margin,
            )
            log.info(
                f"  {name:<8} w={record.w:.3f} h={record.h:.3f} "
                f"x={record.x:.3f} y={record.y:.3f}"
            )

        log.info("🎨 Background templates:")
        for name in list_templates("background"):
            style = resolve_background(name)
            fill = style.fill.to_hex() if style.fill is not None else "none"
            log.info(
                f"  {name:<8} fill={fill:<10} "
                f"radius={style.corner_radius.value} {style.corner_radius.unit}"
            )
        return 0

    except InsetTemplateError as e:
        log.error(f"❌ Invalid inset defaults in config: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
