"""Allow ``python -m figma_codegen``."""

import sys

from figma_codegen.cli import main

sys.exit(main())
