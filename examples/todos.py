from sqlalchemy import Column, ForeignKey, Integer, String, create_engine, insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base

from sqltrace import log_queries
from sqltrace.query_logger import Sink

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(64), nullable=False)
    email = Column(String(128), nullable=False, unique=True)


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True)
    title = Column(String(128), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)


USERS = [
    dict(id=1, name="Alice", email="alice@example.com"),
    dict(id=2, name="Bob", email="bob@example.com"),
]
TODOS = [
    dict(title="Write the report", user_id=1),
    dict(title="Review pull requests", user_id=1),
    dict(title="Water the plants", user_id=2),
]


def create_database() -> Engine:
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(insert(User), USERS)
        conn.execute(insert(Todo), TODOS)
    return engine


def main(log: Sink = print) -> None:
    engine = create_database()
    with engine.connect() as conn:
        log_queries(of=conn, log=log)
        with Session(conn, future=True) as session:
            session.execute(select(User)).all()
            session.execute(select(Todo)).all()
            session.execute(select(User, Todo).join(Todo, User.id == Todo.user_id).where(User.id == 1)).all()


if __name__ == "__main__":
    main()
