import sys

from docs_site_search.cli import main

sys.exit(main())
