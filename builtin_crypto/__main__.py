import sys

from builtin_crypto.cli import main

sys.exit(main())
