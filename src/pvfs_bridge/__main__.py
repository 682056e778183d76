import sys

from pvfs_bridge.main import main

if __name__ == "__main__":
    sys.exit(main())
