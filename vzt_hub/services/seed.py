"""
Default contents for a fresh store.
"""
from typing import Any, Callable, Dict

from .time_rules import format_locale_timestamp


DEMO_USERS = [
    {
        "id": "admin_001",
        "name": "Admin Uživatel",
        "email": "admin@vzt.cz",
        "password": "admin123",
        "role": "admin",
    },
    {
        "id": "supervisor_001",
        "name": "Vedoucí Projektu",
        "email": "vedouci@vzt.cz",
        "password": "vedouci123",
        "role": "supervisor",
    },
    {
        "id": "worker_001",
        "name": "Montážní Dělník",
        "email": "delnik@vzt.cz",
        "password": "delnik123",
        "role": "worker",
    },
]

SAMPLE_PROJECTS = [
    {
        "id": "proj_001",
        "name": "VZT Montáž - Praha Centrum",
        "type": "commercial",
        "address": "Praha 1, Národní 123",
        "completion": 45,
        "description": "Instalace klimatizačního systému v kancelářském centru",
    },
    {
        "id": "proj_002",
        "name": "Průmyslová VZT - Brno",
        "type": "industrial",
        "address": "Brno, Průmyslová 45",
        "completion": 25,
        "description": "Montáž průmyslového vzduchotechnického systému",
    },
]


def default_documents(now, next_id: Callable[[], int]) -> Dict[str, Any]:
    """Seed value for every collection key, in seeding order."""
    stamp = format_locale_timestamp(now)
    sample_messages = [
        {
            "id": next_id(),
            "user": "Admin Uživatel",
            "message": "Dobrý den všem! Nový systém je spuštěn.",
            "timestamp": stamp,
            "channel": "general",
        },
        {
            "id": next_id(),
            "user": "Vedoucí Projektu",
            "message": "Výborně! Konečně máme všechno na jednom místě.",
            "timestamp": stamp,
            "channel": "general",
        },
    ]
    return {
        "users": [dict(u) for u in DEMO_USERS],
        "projects": [dict(p) for p in SAMPLE_PROJECTS],
        "photos": [],
        "reports": [],
        "chat_messages": sample_messages,
        "attendance": [],
        "audit_log": [],
        "theme": "light",
    }
