import sys

from git_msg.cli.main import main

sys.exit(main())
