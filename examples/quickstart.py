"""scryptauth quickstart: hash once, verify on every sign-in."""

import asyncio

from scryptauth import InvalidHashFormat, hash_password, verify_password, verify_password_async

# 1. Hash on sign-up / password change; store the string as-is
stored = hash_password("correct horse battery staple")
print(f"stored: {stored}")

# 2. Verify on sign-in
print("right password:", verify_password("correct horse battery staple", stored))
print("wrong password:", verify_password("Tr0ub4dor&3", stored))

# 3. Corrupt data is an error, not a failed login
try:
    verify_password("anything", "not-a-hash")
except InvalidHashFormat as exc:
    print(f"corrupt: {exc}")

# 4. From async code, derivation runs in a worker thread
ok = asyncio.run(verify_password_async("correct horse battery staple", stored, timeout=5))
print("async:", ok)
