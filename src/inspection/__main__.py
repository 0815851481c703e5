import sys

from src.inspection.cli import main

sys.exit(main())
