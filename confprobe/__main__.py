import sys

from confprobe.app_cli import main

sys.exit(main())
