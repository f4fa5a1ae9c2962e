import sys

from rootfind.cli import main

sys.exit(main())
