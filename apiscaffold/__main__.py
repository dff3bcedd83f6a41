import sys

from apiscaffold.cli import main

sys.exit(main())
