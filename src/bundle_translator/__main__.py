import sys

from bundle_translator.main import main

sys.exit(main())
