import sys

from pingservice.server import main

sys.exit(main())
