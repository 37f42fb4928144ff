from setuptools import setup, find_packages

setup(
    name="mentora",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*", "alembic", "alembic.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt==4.0.1",  # passlib 1.7.4 breaks on bcrypt>=4.1
        "pydantic[email]",
        "pydantic-settings",
        "python-dotenv",
        "alembic"
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
