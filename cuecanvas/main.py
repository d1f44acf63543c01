#!/usr/bin/env python3
"""
CueCanvas - Main Entry Point

Renders a demo pool-table scene to a PNG file.
Run with: python -m cuecanvas.main --output table.png
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import (
    DrawStyle, Entity, Circle, Rectangle, Line, Layer, Window, Anchor
)

logger = logging.getLogger(__name__)

# Nine-foot table playing surface, world units are centimetres
TABLE_WIDTH = 254.0
TABLE_HEIGHT = 127.0
RAIL_WIDTH = 12.0
BALL_RADIUS = 2.86
POCKET_RADIUS = 6.0

CLOTH_COLOR = "#1b5e20"
RAIL_COLOR = "#4e342e"
POCKET_COLOR = "#111111"
CUE_BALL_COLOR = "#fafafa"
OBJECT_BALL_COLOR = "#f9a825"
GUIDE_COLOR = "#ffffff"
BACKGROUND_COLOR = "#202020"


def build_table_scene(window: Window, show_guides: bool = True) -> List[Layer]:
    """
    Populate a window with a table, two balls and aiming guides.
    
    Layers, back to front: "table", "balls", "guides".
    
    Returns:
        The created layers in registration order
    """
    table = Layer(name="table")
    balls = Layer(name="balls")
    guides = Layer(name="guides", visible=show_guides)
    for layer in (table, balls, guides):
        window.add_layer(layer)
    
    rail = Rectangle(-RAIL_WIDTH, -RAIL_WIDTH,
                     TABLE_WIDTH + 2 * RAIL_WIDTH, TABLE_HEIGHT + 2 * RAIL_WIDTH,
                     DrawStyle(fill_style=RAIL_COLOR, stroke_style=RAIL_COLOR),
                     anchor=Anchor.TOPLEFT)
    rail.config.z = -2
    cloth = Rectangle(0, 0, TABLE_WIDTH, TABLE_HEIGHT,
                      DrawStyle(fill_style=CLOTH_COLOR, stroke_style="#0d3b10", line_width=2),
                      anchor=Anchor.TOPLEFT)
    cloth.config.z = -1
    window.add_entity(rail, table)
    window.add_entity(cloth, table)
    
    pocket_style = DrawStyle(fill_style=POCKET_COLOR, stroke_style=POCKET_COLOR)
    for px in (0.0, TABLE_WIDTH / 2, TABLE_WIDTH):
        for py in (0.0, TABLE_HEIGHT):
            window.add_entity(Circle(px, py, POCKET_RADIUS, pocket_style), table)
    
    cue_ball = Circle(TABLE_WIDTH / 4, TABLE_HEIGHT / 2, BALL_RADIUS,
                      DrawStyle(fill_style=CUE_BALL_COLOR, stroke_style="#9e9e9e"))
    cue_ball.name = "cue ball"
    object_ball = Circle(TABLE_WIDTH * 0.7, TABLE_HEIGHT * 0.35, BALL_RADIUS,
                         DrawStyle(fill_style=OBJECT_BALL_COLOR, stroke_style="#5d4037"))
    object_ball.name = "object ball"
    window.add_entity(cue_ball, balls)
    window.add_entity(object_ball, balls)
    
    # Aim line follows both balls; the cue stick trails the cue ball
    aim = Line(cue_ball, object_ball,
               DrawStyle(stroke_style=GUIDE_COLOR, line_width=1.5, dashed=[6, 4], alpha=0.8))
    tip = Entity()
    tip.move_to_entity(cue_ball)
    tip.move(-BALL_RADIUS * 2, 0)
    butt = Entity(tip.position.x - 140, tip.position.y)
    stick = Line(butt, tip, DrawStyle(stroke_style="#d7ccc8", line_width=4))
    window.add_entity(aim, guides)
    window.add_entity(stick, guides)
    
    logger.info(f"Built table scene: {sum(len(l) for l in window.layers)} entities "
                f"on {len(window.layers)} layers")
    return [table, balls, guides]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="CueCanvas - render a demo table scene",
        prog="cuecanvas",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="table.png",
        help="PNG file to write (default: table.png)",
    )
    parser.add_argument("--width", type=int, default=1200, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=700, help="Image height in pixels")
    parser.add_argument(
        "--zoom",
        type=float,
        default=1.0,
        help="Zoom factor applied after fitting the table (default: 1.0)",
    )
    parser.add_argument(
        "--hide-guides",
        action="store_true",
        help="Hide the aim line and cue stick layer",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Record draw calls instead of writing an image",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CueCanvas demo renderer."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    
    try:
        window = Window(0, 0, args.width, args.height)
        layers = build_table_scene(window, show_guides=not args.hide_guides)
        
        bounds = layers[0].get_bounds()
        window.fit_to(bounds, margin=20)
        if args.zoom != 1.0:
            window.zoom_at(args.width / 2, args.height / 2, args.zoom)
        
        if args.dry_run:
            from .graphics.recording import RecordingContext
            ctx = RecordingContext(args.width, args.height)
            window.clear(ctx)
            window.render(ctx)
            logger.info(f"Dry run: {len(ctx.calls)} draw calls, "
                        f"{len(ctx.calls_named('stroke'))} strokes")
            return 0
        
        # Import here so --dry-run works without loading Qt
        from .graphics.qt_context import render_to_image
        
        image = render_to_image(window, args.width, args.height, background=BACKGROUND_COLOR)
        if not image.save(args.output, "PNG"):
            logger.error(f"Failed to write {args.output}")
            return 1
        logger.info(f"Wrote {args.output} ({args.width}x{args.height})")
        return 0
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
