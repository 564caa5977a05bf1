import sys

from wp_versioning.orchestrator import main

if __name__ == "__main__":
    sys.exit(main())
