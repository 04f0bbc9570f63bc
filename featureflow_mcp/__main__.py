import sys

from featureflow_mcp.app import main

if __name__ == "__main__":
    sys.exit(main())
