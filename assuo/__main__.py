import sys

from assuo.cli import main

sys.exit(main())
