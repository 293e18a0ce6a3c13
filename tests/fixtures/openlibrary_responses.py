# ABOUTME: Canned Open Library API response fixtures for testing.
# ABOUTME: Provides realistic JSON dicts matching OL search and author response shapes.

SEARCH_RESPONSE = {
    "numFound": 3,
    "start": 0,
    "docs": [
        {
            "key": "/works/OL27448W",
            "title": "The Lord of the Rings",
            "author_key": ["OL26320A"],
            "author_name": ["J.R.R. Tolkien"],
            "first_publish_year": 1954,
            "subject": ["Fantasy fiction", "Middle Earth (Imaginary place)"],
            "ratings_average": 4.5348,
        },
        {
            "key": "/works/OL17356815W",
            "title": "The Lord of the Rings Sketchbook",
            "first_publish_year": 2005,
            "subject": ["Art"],
        },
        {
            "key": "/works/OL14933414W",
            "title": "The Art of The Lord of the Rings",
            "author_key": ["OL1457018A", "OL26320A"],
            "author_name": ["Wayne G. Hammond", "J.R.R. Tolkien"],
            "first_publish_year": 2015,
            "ratings_average": 4.0,
        },
    ],
}

AUTHOR_TOLKIEN = {
    "key": "/authors/OL26320A",
    "name": "J.R.R. Tolkien",
    "birth_date": "3 January 1892",
    "top_work": "The Hobbit",
    "personal_name": "John Ronald Reuel Tolkien",
}

AUTHOR_HAMMOND = {
    "key": "/authors/OL1457018A",
    "name": "Wayne G. Hammond",
    "birth_date": "1953",
    "top_work": "J.R.R. Tolkien: Artist and Illustrator",
}

AUTHOR_NAME_ONLY = {
    "key": "/authors/OL9999999A",
    "name": "Anonymous Scribe",
}

SEARCH_RESPONSE_EMPTY = {
    "numFound": 0,
    "start": 0,
    "docs": [],
}

SEARCH_RESPONSE_MALFORMED = {
    "numFound": 2,
    "docs": [
        {
            "title": "Odd Record",
            "first_publish_year": "1999",
            "ratings_average": "high",
            "subject": "Single subject",
            "author_key": "/authors/OL5A",
        },
        "not a doc",
        {},
    ],
}
