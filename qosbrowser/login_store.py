"""Saved login credentials, kept in memory and persisted through a DAO."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import List, Protocol


@dataclass
class LoginInfo:
    """One saved set of credentials."""

    name: str = ""
    secret_id: str = ""
    secret_key: str = ""
    remark: str = ""
    timestamp: int = 0


class LoginInfoNotFound(LookupError):
    """No saved login matches the given id or name."""


class LoginInfoDao(Protocol):
    """Storage the login store persists to."""

    def connect(self) -> None: ...

    def create_table(self) -> None: ...

    def select(self) -> List[LoginInfo]: ...

    def exists(self, secret_id: str) -> bool: ...

    def insert(self, info: LoginInfo) -> None: ...

    def update(self, info: LoginInfo) -> None: ...

    def remove(self, secret_id: str) -> None: ...


class LoginStore:
    """Keeps the list of saved logins in step with its storage."""

    def __init__(self, dao: LoginInfoDao) -> None:
        self._dao = dao
        self._infos: List[LoginInfo] = []

    @property
    def infos(self) -> List[LoginInfo]:
        """A copy of the saved logins, in order."""
        return list(self._infos)

    def init(self) -> None:
        """Open the storage and load every saved login."""
        self._dao.connect()
        self._dao.create_table()
        self._infos = list(self._dao.select())

    def save_login_info(self, name: str, secret_id: str, secret_key: str,
                        remark: str) -> None:
        """Insert a login, or update the one with the same secret id."""
        info = LoginInfo(
            name=secret_id if name == "" else name,
            secret_id=secret_id.strip(),
            secret_key=secret_key.strip(),
            remark=remark.strip(),
            timestamp=int(time.time()),
        )
        if self._dao.exists(info.secret_id):
            self._dao.update(info)
            self._infos[self.index_of_login_info(info.secret_id)] = info
        else:
            self._dao.insert(info)
            self._infos.append(info)

    def remove_login_info(self, secret_id: str) -> None:
        """Remove the login with this secret id, if it is stored."""
        if self._dao.exists(secret_id):
            self._dao.remove(secret_id)
            del self._infos[self.index_of_login_info(secret_id)]

    def index_of_login_info(self, secret_id: str) -> int:
        """Position of the login with this secret id."""
        for index, info in enumerate(self._infos):
            if info.secret_id == secret_id:
                return index
        raise LoginInfoNotFound(f"no login info for id {secret_id}")

    def login_name_list(self) -> List[str]:
        """Names of all saved logins, in order."""
        return [info.name for info in self._infos]

    def login_info_by_name(self, name: str) -> LoginInfo:
        """The first saved login with this name."""
        for info in self._infos:
            if info.name == name:
                return info
        raise LoginInfoNotFound(f"no login info named {name}")