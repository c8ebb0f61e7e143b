import sys

from weathervista.cli import main

sys.exit(main())
