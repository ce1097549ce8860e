"""Command-line interface for svd2x2."""

import argparse
import sys

from . import __version__
from .editor import (
    F_SHAPE,
    STAGE_LABELS,
    EditorState,
    radians_to_slider,
    shape_polygons,
    slider_to_radians,
)
from .matrix import identity, transform_points
from .svd import classify


def format_matrix(mat, places=4):
    """Render a matrix as two aligned rows with *places* decimals."""
    width = places + 4
    return "\n".join(
        "  [" + " ".join(f"{v:{width}.{places}f}" for v in row) + " ]"
        for row in mat
    )


def _matrix_arg(args):
    return ((args.a00, args.a01), (args.a10, args.a11))


def _add_matrix_args(parser):
    for name in ("a00", "a01", "a10", "a11"):
        parser.add_argument(name, type=float, help=f"matrix entry {name[1:]}")


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------

def _cmd_decompose(args):
    state = EditorState.from_matrix(_matrix_arg(args))
    svd = state.svd
    gram, rank = classify(state.matrix)

    print("[svd2x2] Decomposing A")
    print(format_matrix(state.matrix, args.places))
    print("U =")
    print(format_matrix(svd.u, args.places))
    print(f"S = ({svd.s[0]:.{args.places}f}, {svd.s[1]:.{args.places}f})")
    print("Vt =")
    print(format_matrix(svd.vt, args.places))
    print(f"[svd2x2]   U angle  {radians_to_slider(state.u_angle)}°")
    print(f"[svd2x2]   Vt angle {radians_to_slider(state.vt_angle)}°")
    print(f"[svd2x2]   cases: gram={gram.value} rank={rank.value}")


def _cmd_reconstruct(args):
    state = EditorState.from_matrix(identity())
    state = state.with_u_angle(slider_to_radians(args.u_angle))
    state = state.with_vt_angle(slider_to_radians(args.vt_angle))
    state = state.with_sigma(args.sigma)

    s0, s1 = state.svd.s
    print(f"[svd2x2] Reconstructing from U {args.u_angle:g}°, "
          f"S ({s0:g}, {s1:g}), Vt {args.vt_angle:g}°")
    print("A =")
    print(format_matrix(state.matrix, args.places))


def _cmd_stages(args):
    state = EditorState.from_matrix(_matrix_arg(args))
    print("[svd2x2] Transforming reference shape")
    for label, mat in zip(STAGE_LABELS, state.stages()):
        print(f"{label}:")
        for poly in shape_polygons(transform_points(mat, F_SHAPE)):
            print("  " + " ".join(f"({x:.{args.places}f}, {y:.{args.places}f})"
                                  for x, y in poly))


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser():
    """Construct and return the top-level :class:`ArgumentParser`."""
    parser = argparse.ArgumentParser(
        prog="svd2x2",
        description="Closed-form SVD of 2x2 matrices – no external dependencies.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--places", type=int, default=4, help="decimal places shown (default: 4)")

    sub = parser.add_subparsers(dest="command", help="operation")

    # --- decompose ----------------------------------------------------------
    p_dec = sub.add_parser(
        "decompose",
        help="Decompose A into U, S, Vt",
        description="Print the singular value decomposition of a 2x2 matrix.",
    )
    _add_matrix_args(p_dec)
    p_dec.set_defaults(func=_cmd_decompose)

    # --- reconstruct --------------------------------------------------------
    p_rec = sub.add_parser(
        "reconstruct",
        help="Rebuild A from rotation angles and scale factors",
        description="Compose U S Vt from slider angles (degrees) and scale factors.",
    )
    p_rec.add_argument("--u-angle", type=float, default=0.0, help="U rotation in degrees, clamped to ±180 (default: 0)")
    p_rec.add_argument("--vt-angle", type=float, default=0.0, help="Vt rotation in degrees, clamped to ±180 (default: 0)")
    p_rec.add_argument("--sigma", type=float, nargs=2, default=[1.0, 1.0], metavar=("S0", "S1"),
                       help="scale factors, clamped to [0, 5] (default: 1 1)")
    p_rec.set_defaults(func=_cmd_reconstruct)

    # --- stages -------------------------------------------------------------
    p_st = sub.add_parser(
        "stages",
        help="Show the reference shape after each factor",
        description="Apply Vt, then S, then U to the reference 'F' shape.",
    )
    _add_matrix_args(p_st)
    p_st.set_defaults(func=_cmd_stages)

    return parser


def main(argv=None):
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    args.func(args)
