import sys

from uuid_remount.cli import main

sys.exit(main())
