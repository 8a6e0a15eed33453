import sys

from zoomedit.adapters.textual.app import main

sys.exit(main())
