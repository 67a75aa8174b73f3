import sys

from src.journey.cli import main

sys.exit(main())
