from collections.abc import Iterable
from pathlib import Path
import logging

import google.auth
import google.auth.exceptions
from google.oauth2 import service_account
from googleapiclient.discovery import build, Resource

from .exceptions import SheetsUsageError

logger = logging.getLogger(__name__)

class SheetsBinding():
    """
    Holds the Sheets client binding every API wrapper in this package calls through.
    Authentication is not done here, the caller either binds an already built
    service Resource or hands over credentials obtained however they like.
    As a convenience the binding can also resolve a service account file or
    the application default credentials through google-auth.

    It makes no sense to have multiple bindings per application so a module
    singleton is provided, sheets_binding, but nothing stops making more.
    """

    __SCOPES = {
        "sheets": "https://www.googleapis.com/auth/spreadsheets",
        "sheets-ro": "https://www.googleapis.com/auth/spreadsheets.readonly",
        "drive-file": "https://www.googleapis.com/auth/drive.file",
        "drive": "https://www.googleapis.com/auth/drive",
        "drive-ro": "https://www.googleapis.com/auth/drive.readonly",
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/"
    __DEFAULT_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(self, service: Resource|None = None) -> None:
        self.reset()
        if service is not None:
            self.bind(service)

    def __bool__(self) -> bool:
        """True if a service is available to make calls with"""
        return self.bound

    def __str__(self) -> str:
        if self.bound:
            return f"Bound:{str(self.__scopes)}"
        return "Unbound"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be accepted.
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIX):
            sc = s
        return sc

    def reset(self) -> None:
        """
        Reset all binding state to defaults.
        """
        self.__service = None
        self.__creds = None
        self.__service_account_file = None
        self.__scopes = list(self.__DEFAULT_SCOPES)
        self.__developer_key = None

    @property
    def bound(self) -> bool:
        return self.__service is not None

    @property
    def service(self) -> Resource:
        """
        The bound Sheets service.  Making calls without one is a usage error,
        either bind() a service, call from_credentials() or connect() first.
        """
        if self.__service is None:
            raise SheetsUsageError("No Sheets client is bound, call bind() or connect() first")
        return self.__service

    @property
    def creds(self):
        """Credentials used to build the current service, None if bound directly"""
        return self.__creds

    @property
    def scopes(self) -> list[str]:
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|str|list[str]) -> None:
        slist = []
        if value is not None:
            vals = [value] if isinstance(value, str) or not isinstance(value, Iterable) else value
            for v in vals:
                s = self.get_scope(str(v))
                if s and s not in slist:
                    slist.append(s)
        self.__scopes = slist if slist else list(self.__DEFAULT_SCOPES)

    @property
    def developer_key(self) -> str|None:
        return self.__developer_key

    @developer_key.setter
    def developer_key(self, value: str|None) -> None:
        self.__developer_key = value if value is None else str(value)

    @property
    def service_account_file(self) -> Path|None:
        return self.__service_account_file

    @service_account_file.setter
    def service_account_file(self, value: Path|str|None) -> None:
        self.__service_account_file = value if value is None or isinstance(value, Path) else Path(str(value))

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for getting it all at once for pushing into a json, toml, ini, etc, file.
        """
        return {
            'service_account_file': str(self.__service_account_file) if self.__service_account_file else None,
            'scopes': list(self.__scopes),
            'developer_key': self.__developer_key,
        }

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict.
        Only the keys present are changed.  A change drops the current service
        so the next connect() picks it up.
        """
        changed = False
        if 'service_account_file' in config:
            self.service_account_file = config['service_account_file']
            changed = True
        if 'scopes' in config:
            self.scopes = config['scopes']
            changed = True
        if 'developer_key' in config:
            self.developer_key = config['developer_key']
            changed = True
        if changed and self.__creds is not None:
            self.__service = None
            self.__creds = None

    def bind(self, service: Resource) -> Resource:
        """
        Bind an already built Sheets v4 service, as from
        googleapiclient.discovery.build("sheets", "v4", ...)
        """
        if service is None:
            raise ValueError("Cannot bind a None service")
        self.__service = service
        self.__creds = None
        logger.debug("bound sheets service %r", service)
        return service

    def from_credentials(self, credentials) -> Resource:
        """
        Build and bind a Sheets service from google-auth credentials.
        """
        service = build("sheets", "v4", credentials=credentials,
                        developerKey=self.__developer_key, cache_discovery=False)
        self.bind(service)
        self.__creds = credentials
        return service

    def connect(self) -> bool:
        """
        Resolve credentials from the configured service account file, or
        failing that the application default credentials, and bind a service.
        Returns True if a service is bound afterwards.
        """
        creds = None
        saf = self.__service_account_file
        if saf is not None:
            if saf.exists() and saf.is_file():
                logger.info("loading service account credentials from %s", saf)
                creds = service_account.Credentials.from_service_account_file(str(saf), scopes=self.__scopes)
            else:
                logger.warning("service account file %s not found, trying default credentials", saf)
        if creds is None:
            try:
                # GOOGLE_APPLICATION_CREDENTIALS envvar and other cloud default locations
                creds, _ = google.auth.default(scopes=self.__scopes)
            except google.auth.exceptions.DefaultCredentialsError as e:
                logger.warning("no default credentials available: %s", e)
                return False
        self.from_credentials(creds)
        return self.bound

    def unbind(self) -> None:
        self.__service = None
        self.__creds = None

sheets_binding = SheetsBinding()

def get_service(service: Resource|None = None) -> Resource:
    """
    The service to make a call with, an explicit one wins over the module binding.
    """
    if service is not None:
        return service
    return sheets_binding.service
