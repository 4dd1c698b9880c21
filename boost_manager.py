#
#   Processor Boost Mode Manager
#   Inspect and change the CPU boost mode of the active Windows power plan.
#
import sys

from boostmgr.session import main

if __name__ == "__main__":
    sys.exit(main())
