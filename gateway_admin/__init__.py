"""
gateway-admin Application Package

Directory Structure:
├── routers/           # FastAPI route handlers
│   ├── selectors.py   # /selector management endpoints
│   └── health.py      # Health checks
├── schemas/           # Pydantic models for API requests/responses
│   ├── selector.py    # Selector write/read models, paging shapes
│   └── envelope.py    # Uniform {code, status, message, data} result
├── domain/            # Errors, fault kinds, events, ports, specifications
├── application/       # Resource access layer (envelope + error policy)
├── services/          # Selector service implementations (memory, database)
├── db/                # SQLAlchemy models, session factory and repositories
└── config.py         # Application configuration

Model Types Clarification:
1. **Write model** (SelectorDTO): what callers send on create/update
2. **Read model** (SelectorVO): what the selector service hands back, with
   derived fields such as ``matchModeName``

The access layer never touches storage directly; it only talks to a
SelectorServicePort and maps the outcome onto an AdminResult envelope.
"""
