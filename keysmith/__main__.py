import sys

from keysmith.cli import main

sys.exit(main())
