import sys

from ctxcopy.cli.main import main

sys.exit(main())
