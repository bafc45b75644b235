import sys

from compdocs.cli import main

sys.exit(main())
