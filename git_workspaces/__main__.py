import sys

from git_workspaces.cli.main import main

sys.exit(main())
