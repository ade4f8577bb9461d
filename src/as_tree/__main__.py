import sys

from as_tree.cli import main

sys.exit(main())
