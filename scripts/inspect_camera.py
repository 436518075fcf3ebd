#!/usr/bin/env python3
"""
Camera Inspector

Builds a camera (optionally from a YAML config), applies slider-style
rotations and prints the resulting basis and matrices.

Usage:
    python scripts/inspect_camera.py --config configs/default_camera.yaml --rot 30 0 0
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scenecam.core.config import CameraConfig, load_config
from scenecam.core.exceptions import ConfigurationError
from scenecam.rendering.camera import Camera
from scenecam.utils.logging import setup_logging
from scenecam.utils.math_utils import format_matrix

MATRICES = {
    'model_view': Camera.get_model_view_matrix,
    'inverse_model_view': Camera.get_inverse_model_view_matrix,
    'scale': Camera.get_scale_matrix,
    'inverse_scale': Camera.get_inverse_scale_matrix,
    'unhinge': Camera.get_unhinge_matrix,
    'projection': Camera.get_projection_matrix,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Inspect viewer camera state and matrices')
    parser.add_argument('--config', '-c', type=str, default=None,
                        help='Camera YAML config (defaults used if omitted)')
    parser.add_argument('--rot', nargs=3, type=float, metavar=('U', 'V', 'W'), default=None,
                        help='Absolute U/V/W rotation angles in degrees')
    parser.add_argument('--screen', nargs=2, type=int, metavar=('WIDTH', 'HEIGHT'), default=None,
                        help='Screen size in pixels')
    parser.add_argument('--matrix', '-m', choices=sorted(MATRICES) + ['all'], default='projection',
                        help='Matrix to print')
    parser.add_argument('--precision', type=int, default=4,
                        help='Decimal places in matrix output')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Debug logging')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else CameraConfig()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    camera = Camera(config)
    if args.screen:
        camera.set_screen_size(*args.screen)
    if args.rot:
        camera.set_rot_uvw(*args.rot)

    print(camera)
    names = sorted(MATRICES) if args.matrix == 'all' else [args.matrix]
    for name in names:
        print(f"\n{name}:")
        print(format_matrix(MATRICES[name](camera), args.precision))
    return 0


if __name__ == '__main__':
    sys.exit(main())
