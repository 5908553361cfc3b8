import sys

from cracker_chase.main import main

sys.exit(main())
