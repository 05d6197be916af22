import sys

from bracketengine.cli import main

sys.exit(main())
