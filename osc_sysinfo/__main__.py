import sys

from osc_sysinfo.cli import main

sys.exit(main())
