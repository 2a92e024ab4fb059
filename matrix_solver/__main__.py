import sys

from matrix_solver.app import main

if __name__ == "__main__":
    sys.exit(main())
