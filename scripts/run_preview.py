import sys

from lockdrop.cli import main

# e.g. python scripts/run_preview.py --amount 100000 --duration 12 --current-amount 50000 --current-duration 6
sys.exit(main())
