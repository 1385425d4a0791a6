#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
签发访问令牌
用于调用需要认证的接口（GET /api/user）

运行: python scripts/issue_token.py --user-id 1 --username admin [--role admin] [--minutes 60]
"""

import sys
import argparse
from datetime import timedelta
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent.resolve()
BACKEND_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(BACKEND_DIR))

from core.security import TokenData, create_token


def main():
    parser = argparse.ArgumentParser(description="签发 JWT 访问令牌")
    parser.add_argument("--user-id", type=int, required=True)
    parser.add_argument("--username", required=True)
    parser.add_argument("--role", default="user")
    parser.add_argument("--minutes", type=int, default=None, help="有效期（分钟），默认取 JWT_EXPIRE_MINUTES")
    args = parser.parse_args()

    expires = timedelta(minutes=args.minutes) if args.minutes else None
    token = create_token(TokenData(user_id=args.user_id, username=args.username, role=args.role), expires)
    print(token)


if __name__ == "__main__":
    main()
