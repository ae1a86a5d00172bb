import sys

from review_agent.action import main

sys.exit(main())
