import sys

from oop_patterns.demo import main

sys.exit(main())
