"""config_loading.py"""

import sys

from declargs import Args
from declargs.config import loader

loader("declarations.yaml")

if __name__ == "__main__":
    args = Args()
    args.read(sys.argv)
    args.render_diagnostics()
    print(args.debug())
