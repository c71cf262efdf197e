"""
Workload sample driver.

Prints the first five addresses of each workload:
- Machine learning (sequential 4K segments in a 32-bit space)
- AAA games (asset reuse over 2K/4K/8K segment tiers)
- Stateless microservices (10 services cycling over 2K segments)
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from workload.demo import main


if __name__ == "__main__":
    sys.exit(main())
