import sys

from tuxkart.cli import main

sys.exit(main())
