import sys

from signicat.cli import main

sys.exit(main())
