import argparse
import logging
import sys

from .core import (
    OptionParameters, SurfaceRange, OptionType, CALL,
    DEFAULT_STEPS, DEFAULT_VOL_RANGE, DEFAULT_SPOT_BAND,
)
from .black_scholes import price_option, greeks_option
from .surface import generate_surface
from .exceptions import BSPricerError


def _kind(s: str):
    try:
        return OptionType.parse(s)
    except BSPricerError:
        raise argparse.ArgumentTypeError("kind must be 'call' or 'put'") from None


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--S", type=float, default=100.0, help="spot price")
    parser.add_argument("--K", type=float, default=100.0, help="strike price")
    parser.add_argument("--T", type=float, default=1.0, help="years")
    parser.add_argument("--r", type=float, default=0.05, help="cont. risk-free")
    parser.add_argument("--sigma", type=float, default=0.2)
    parser.add_argument("--kind", type=_kind, default=CALL, help="call|put")


def _params(args) -> OptionParameters:
    return OptionParameters(args.S, args.K, args.T, args.r, args.sigma, args.kind)


def cmd_price(args):
    res = price_option(_params(args))
    print(f"call  {res.call_price:.{args.digits}f}")
    print(f"put   {res.put_price:.{args.digits}f}")


def cmd_greeks(args):
    g = greeks_option(_params(args))
    for name, value in g.as_dict().items():
        print(f"{name:<6} {value:.{args.digits}f}")


def cmd_surface(args):
    params = _params(args)
    if args.min_spot is None and args.max_spot is None:
        rng = SurfaceRange.around_spot(
            params, vol_range=(args.min_vol, args.max_vol), steps=args.steps
        )
    else:
        lo, hi = (b * params.spot_price for b in DEFAULT_SPOT_BAND)
        rng = SurfaceRange(
            strike_price=params.strike_price,
            time_to_maturity=params.time_to_maturity,
            risk_free_rate=params.risk_free_rate,
            min_spot=args.min_spot if args.min_spot is not None else lo,
            max_spot=args.max_spot if args.max_spot is not None else hi,
            min_vol=args.min_vol,
            max_vol=args.max_vol,
            steps=args.steps,
        )
    surf = generate_surface(rng)
    grid = surf.call_grid if params.option_type == CALL else surf.put_grid

    # rows are printed high vol first, like the heatmap
    print("vol\\spot " + " ".join(f"{s:>8.2f}" for s in surf.spot_axis))
    for i in range(surf.steps - 1, -1, -1):
        cells = " ".join(f"{v:>8.2f}" for v in grid[i])
        print(f"{surf.vol_axis[i]:>8.2f} {cells}")


def main(argv=None):
    p = argparse.ArgumentParser(prog="bspricer", description="Black-Scholes pricing CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Prices
    p_px = sub.add_parser("price", help="Black-Scholes call and put prices")
    add_common(p_px)
    p_px.add_argument("--digits", type=int, default=4)
    p_px.set_defaults(func=cmd_price)

    # Greeks
    p_gk = sub.add_parser("greeks", help="delta, gamma, theta (daily), vega, rho")
    add_common(p_gk)
    p_gk.add_argument("--digits", type=int, default=6)
    p_gk.set_defaults(func=cmd_greeks)

    # Surface
    p_sf = sub.add_parser("surface", help="spot x vol price grid")
    add_common(p_sf)
    p_sf.add_argument("--min-spot", dest="min_spot", type=float, default=None)
    p_sf.add_argument("--max-spot", dest="max_spot", type=float, default=None)
    p_sf.add_argument("--min-vol", dest="min_vol", type=float, default=DEFAULT_VOL_RANGE[0])
    p_sf.add_argument("--max-vol", dest="max_vol", type=float, default=DEFAULT_VOL_RANGE[1])
    p_sf.add_argument("--steps", type=int, default=DEFAULT_STEPS)
    p_sf.set_defaults(func=cmd_surface)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except BSPricerError as e:
        print(f"bspricer: error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
