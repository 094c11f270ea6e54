import sys

from fuel_surcharge_feed.cli import main

sys.exit(main())
