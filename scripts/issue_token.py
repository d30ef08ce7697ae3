#!/usr/bin/env python3
"""Print a signed identity token for local testing.

Usage: issue_token.py UID [EMAIL] [DISPLAY_NAME]
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blog import create_app
from blog.auth import issue_token

if __name__ == '__main__':
    if len(sys.argv) < 2:
        print(__doc__.strip())
        sys.exit(1)

    uid = sys.argv[1]
    email = sys.argv[2] if len(sys.argv) > 2 else None
    display_name = sys.argv[3] if len(sys.argv) > 3 else None

    app = create_app()
    with app.app_context():
        print(issue_token(uid, email=email, display_name=display_name))
