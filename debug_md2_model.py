#!/usr/bin/env python3
"""
MD2 Model Diagnostic Tool

Loads an MD2 model and reports:
- Header counts and skin names
- Frame names covered by each animation
- Bounding radius and per-animation bounds
- The playback cursor after simulating a few seconds

Usage:
    python debug_md2_model.py path/to/model.md2 [--animation RUN] [--seconds 2.5]
"""

import argparse
import logging
import sys

import numpy as np

from md2player import ANIMATIONS, AnimationName, Md2, Md2Error


class Md2Diagnostics:
    """Diagnostic report for an MD2 model."""

    def __init__(self, md2: Md2):
        self.md2 = md2
        self.warnings = []

    def print_basic_info(self):
        md2 = self.md2
        print("\n📊 Basic Information:")
        print(f"   Skin size: {md2.skin_width}x{md2.skin_height}")
        print(f"   Skins: {md2.skin_count}")
        print(f"   Vertices: {md2.vertex_count}")
        print(f"   TexCoords: {md2.texcoord_count}")
        print(f"   Triangles: {md2.triangle_count}")
        print(f"   Frames: {md2.frame_count}")
        for skin in md2.skins:
            print(f"   • {skin}")
        if md2.skin_width <= 0 or md2.skin_height <= 0:
            self.warnings.append("Skin size is not positive, texture coordinates will be invalid")

    def print_animations(self):
        model = self.md2.model
        print("\n🎞️  Animations:")
        for name in AnimationName:
            animation = ANIMATIONS[name]
            first = model.frames[animation.start].name
            last = model.frames[animation.end].name
            bounds = np.array([model.frame_bounds(i) for i in range(animation.start, animation.end + 1)])
            size = bounds[:, 1].max(axis=0) - bounds[:, 0].min(axis=0)
            print(f"   {name.name:<20} frames {animation.start:>3}-{animation.end:<3} "
                  f"@ {animation.fps:>4.1f} fps  [{first} .. {last}]  "
                  f"size {size[0]:.1f} x {size[1]:.1f} x {size[2]:.1f}")
        print(f"\n   Bounding radius: {model.bounding_radius:.2f}")

    def simulate(self, animation: str, seconds: float, step: float = 1.0 / 60.0):
        md2 = self.md2
        md2.set_animation(animation)
        elapsed = 0.0
        while elapsed < seconds:
            md2.update(step)
            elapsed += step
        vertices = md2.generate_vertices()
        lengths = np.linalg.norm(vertices['normal'], axis=1)
        print(f"\n▶️  Simulated {seconds:.2f}s of {md2.active_animation.name}:")
        print(f"   Cursor: {md2.playback.frame:.3f} "
              f"(frame {md2.playback.current_frame}, blend {md2.playback.interpolation:.3f})")
        print(f"   Generated vertices: {len(vertices)}")
        print(f"   Normal length range: {lengths.min():.3f} - {lengths.max():.3f}")

    def print_summary(self):
        print("\n" + "=" * 60)
        if self.warnings:
            print(f"   ⚠️  {len(self.warnings)} Warnings:")
            for warning in self.warnings:
                print(f"      • {warning}")
        else:
            print("   ✅ No issues found")


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Inspect an MD2 model.")
    parser.add_argument("path", help="Path to the .md2 file")
    parser.add_argument("--animation", default="STAND", help="Animation to simulate (default: STAND)")
    parser.add_argument("--seconds", type=float, default=1.0, help="Seconds of playback to simulate")
    parser.add_argument("--verbose", action="store_true", help="Show loader log output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    print(f"🔍 Analyzing MD2 model: {args.path}")
    print("=" * 60)

    try:
        md2 = Md2(args.path)
    except Md2Error as e:
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    try:
        AnimationName.from_name(args.animation)
    except ValueError as e:
        print(f"❌ ERROR: {e}")
        sys.exit(1)

    diagnostics = Md2Diagnostics(md2)
    diagnostics.print_basic_info()
    diagnostics.print_animations()
    diagnostics.simulate(args.animation, args.seconds)
    diagnostics.print_summary()
    sys.exit(0)


if __name__ == "__main__":
    main()
