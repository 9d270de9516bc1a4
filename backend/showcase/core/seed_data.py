"""Seed Dataset — the fixed literal users and portfolios written on first use.

Invariants:
    - Exactly one administrator and two contributors
    - Every seeded portfolio is authored by a seeded user; author_name matches display_name
    - likes/ratings reference seeded user ids only
    - Pure: the reference time is injected, documents are plain JSON-safe dicts

Design Decisions:
    - Literal dicts (not models) so the seed is exactly what lands in the store
    - Demo credentials are intentionally trivial; secrets are plaintext by requirement
"""

from datetime import datetime, timedelta


def initial_users() -> list[dict]:
    return [
        {
            "id": "user-1", "username": "a", "password": "a",
            "display_name": "Admin User", "role": "admin",
        },
        {
            "id": "user-2", "username": "teacher1", "password": "password",
            "display_name": "Jane Doe", "role": "contributor",
        },
        {
            "id": "user-3", "username": "teacher2", "password": "password",
            "display_name": "John Smith", "role": "contributor",
        },
    ]


def initial_portfolios(now: datetime) -> list[dict]:
    return [
        {
            "id": "portfolio-1",
            "author_id": "user-2",
            "author_name": "Jane Doe",
            "title": "School Library Management System",
            "description": (
                "A React and Node.js system for managing book loans and "
                "returns in the school library."
            ),
            "category": "personnel",
            "type": "application",
            "cover_image": "https://images.unsplash.com/photo-1544716278-ca5e3f4abd8c?q=80&w=1974&auto=format&fit=crop",
            "album_images": [
                "https://images.unsplash.com/photo-1507842217343-583bb7270b66?q=80&w=2070&auto=format&fit=crop",
                "https://images.unsplash.com/photo-1521587760476-6c12a4b040da?q=80&w=2070&auto=format&fit=crop",
            ],
            "views": 152,
            "likes": ["user-1", "user-3"],
            "ratings": [
                {"user_id": "user-1", "score": 5},
                {"user_id": "user-3", "score": 4},
            ],
            "created_at": (now - timedelta(days=5)).isoformat(),
        },
        {
            "id": "portfolio-2",
            "author_id": "user-3",
            "author_name": "John Smith",
            "title": "Interactive Mathematics Teaching",
            "description": (
                "Interactive teaching material that makes complex mathematical "
                "concepts easier to grasp, built with GeoGebra and PowerPoint."
            ),
            "category": "commander",
            "type": "other",
            "cover_image": "https://images.unsplash.com/photo-1509228468518-180dd4864904?q=80&w=2070&auto=format&fit=crop",
            "album_images": [],
            "views": 89,
            "likes": ["user-2"],
            "ratings": [{"user_id": "user-2", "score": 5}],
            "created_at": (now - timedelta(days=2)).isoformat(),
        },
        {
            "id": "portfolio-3",
            "author_id": "user-2",
            "author_name": "Jane Doe",
            "title": "English E-learning Website",
            "description": (
                "An online English learning platform with videos, quizzes "
                "and educational games."
            ),
            "category": "personnel",
            "type": "application",
            "cover_image": "https://images.unsplash.com/photo-1456513080510-7bf3a84b82f8?q=80&w=1973&auto=format&fit=crop",
            "album_images": [
                "https://images.unsplash.com/photo-1516321497487-e288fb19713f?q=80&w=2070&auto=format&fit=crop",
            ],
            "views": 230,
            "likes": ["user-1", "user-2", "user-3"],
            "ratings": [
                {"user_id": "user-1", "score": 4},
                {"user_id": "user-3", "score": 5},
            ],
            "created_at": now.isoformat(),
        },
    ]
