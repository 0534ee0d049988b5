#
# FSUnits Module Entry Point, python -m fsunits [-n | -h | -H] [-v] COMMAND ...
#

# Standard library -----------------------------------------------------------------------------------------------------
import sys

# Local ----------------------------------------------------------------------------------------------------------------
from .cli import main


# Main -----------------------------------------------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
