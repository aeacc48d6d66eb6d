import sys

from cohort_toolkit.cli import main

sys.exit(main())
