import sys

from kgencode.exporter import main

sys.exit(main())
