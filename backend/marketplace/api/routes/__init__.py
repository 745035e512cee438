"""Route Modules — one file per aggregate, each exposing RPC procedures.

Invariants:
    - Each module defines its own APIRouter under RPC_PREFIX
    - Queries are GET (query-string input); mutations are POST (JSON body)
    - Routes never contain business logic (delegate to services/)
"""

RPC_PREFIX = "/api/v1/rpc"
