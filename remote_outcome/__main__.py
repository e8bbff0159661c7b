import sys

from remote_outcome.main import main

sys.exit(main())
