import sys

from headache.cli import main

sys.exit(main())
