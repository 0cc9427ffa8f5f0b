"""argument_examples.py"""

import sys

from declargs import (
    Args,
    FlagArg,
    RangeArg,
    RangeDomain,
    SequenceArgRangeReader,
    SequenceArgWriter,
    ValueArg,
    heading,
)

help_flag = FlagArg("h", "help").set_description("Print this message")
verbose = FlagArg("v", "verbose").set_description("Enable verbose output")
iterations = (
    ValueArg("i", "iterations", type=int, default=10)
    .set_usage("<n>")
    .set_description("Number of iterations")
)

heading("Network:")
ports = ValueArg(
    "ports",
    default=[],
    reader=SequenceArgRangeReader(RangeDomain.integers(1, 65536)),
    writer=SequenceArgWriter(),
).set_description("Ports to probe, e.g. 80.443..450")
damping = RangeArg("d", "damping", type=float, default=1.0, lower=0.5, upper=2.0)
damping.set_description("Back-off damping factor")


def main() -> int:
    args = Args()
    result = args.read(sys.argv)
    if help_flag or result.fail:
        args.render_diagnostics()
        args.render_help()
        return 0 if help_flag else 1
    if verbose:
        print(args.debug())
    print(f"Probing {ports.value} for {iterations.value} iterations")
    return 0


if __name__ == "__main__":
    sys.exit(main())
