import sys

from site_publisher.cli import main

sys.exit(main())
