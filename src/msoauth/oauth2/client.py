from __future__ import annotations

import logging
from typing import Any, Mapping

import requests
from authlib.common.urls import add_params_to_uri
from authlib.integrations.requests_client import OAuth2Session
from requests.adapters import BaseAdapter

from .config import AccessTokenType, ProviderConfig
from .exceptions import IdentityProviderError
from .interfaces import ProviderDefinition, ResourceOwner
from .scopes import join_scopes
from .token import AccessToken

logger = logging.getLogger(__name__)


class OAuth2Client:
    """Generic OAuth2 client driven by a :class:`ProviderDefinition`.

    The authorization-code mechanics (state generation, token request body,
    client authentication, token model) come from authlib's
    :class:`OAuth2Session`; the definition supplies endpoints, scope
    formatting, error detection and the resource owner mapping.
    """

    def __init__(
        self,
        definition: ProviderDefinition,
        config: ProviderConfig | None = None,
        *,
        session: OAuth2Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            definition: Provider endpoints and hooks.
            config: Provider configuration. If ``None``, it is read from the
                environment.
            session: Pre-built authlib session. If ``None``, one is built from
                ``config``.
        """
        self.definition = definition
        self.config = config or ProviderConfig()
        self._access_token_type: AccessTokenType = self.config.access_token_type
        self._state: str | None = None

        self.session = session or self._build_session()
        self.session.register_compliance_hook(
            "access_token_response", self._check_token_response
        )

    def _build_session(self) -> OAuth2Session:
        cfg = self.config
        return OAuth2Session(
            client_id=cfg.client_id,
            client_secret=(
                cfg.client_secret.get_secret_value() if cfg.client_secret else None
            ),
            redirect_uri=cfg.redirect_uri,
            token_endpoint_auth_method="client_secret_post",
        )

    def get_default_scopes(self) -> tuple[str, ...]:
        """Return the scopes requested when the caller names none."""
        return self.definition.default_scopes

    def get_scope_separator(self) -> str:
        """Return the separator placed between scopes in the ``scope`` parameter."""
        return self.definition.scope_separator

    def get_base_authorization_url(self) -> str:
        return self.definition.authorize_url(self.config)

    def get_base_access_token_url(self, params: Mapping[str, Any] | None = None) -> str:
        return self.definition.access_token_url(self.config, params or {})

    def get_resource_owner_details_url(self, token: AccessToken) -> str:
        return self.definition.resource_owner_details_url(self.config, token)

    @property
    def state(self) -> str | None:
        """State sent with the most recent authorization URL."""
        return self._state

    def get_authorization_url(self, options: Mapping[str, Any] | None = None) -> str:
        """Build the URL the user agent is sent to for authorization.

        Args:
            options: Optional overrides. ``state`` and ``scope`` (a list or a
                pre-joined string) are recognised; any other key is added to
                the query as-is (e.g. ``approval_prompt``, ``response_type``).
                ``client_id`` always comes from the configuration.

        Returns:
            The authorization URL. The state it carries is available
            afterwards via :attr:`state`.
        """
        params = dict(options or {})
        params.pop("client_id", None)
        state = params.pop("state", None)
        scope = params.pop("scope", None)
        if scope is None:
            scope = self.get_default_scopes()
        scope = join_scopes(scope, self.get_scope_separator())
        params.setdefault("approval_prompt", "auto")

        base_url = self.get_base_authorization_url()
        url, state = self.session.create_authorization_url(
            base_url, state=state, scope=scope, **params
        )
        if not scope:
            # authlib leaves empty values out of the query.
            url = add_params_to_uri(url, [("scope", scope)])
        self._state = state
        logger.debug("Built %s authorization URL on %s", self.definition.name, base_url)
        return url

    def get_access_token(
        self,
        grant: str = "authorization_code",
        options: Mapping[str, Any] | None = None,
    ) -> AccessToken:
        """Request an access token from the token endpoint.

        Args:
            grant: OAuth2 grant type, e.g. ``"authorization_code"`` or
                ``"refresh_token"``.
            options: Grant parameters, e.g. ``{"code": "..."}``. A ``timeout``
                entry replaces the configured timeout for this request;
                ``grant_type`` is always ``grant``.

        Returns:
            The parsed :class:`AccessToken`.

        Raises:
            IdentityProviderError: If the response carries an error object.
        """
        params = dict(options or {})
        params.pop("grant_type", None)
        timeout = params.pop("timeout", self.config.timeout)
        url = self.get_base_access_token_url(params)
        logger.debug("Requesting %s access token from %s", self.definition.name, url)

        raw = self.session.fetch_token(
            url,
            grant_type=grant,
            timeout=timeout,
            **params,
        )
        token = AccessToken.from_response(raw, self.definition.resource_owner_id_key)
        logger.info("Obtained %s access token (%s grant).", self.definition.name, grant)
        return token

    def _check_token_response(self, response: requests.Response) -> requests.Response:
        """Compliance hook run by authlib on every token response."""
        try:
            data = response.json()
        except ValueError:
            # Non-JSON bodies are reported by authlib's own token parser.
            return response
        self._check_response(response, data)
        return response

    def _check_response(self, response: requests.Response, data: Any) -> None:
        try:
            self.definition.check_response(response.status_code, response.reason, data)
        except IdentityProviderError:
            logger.warning(
                "%s returned an error response (HTTP %s).",
                self.definition.name,
                response.status_code,
            )
            raise

    @property
    def access_token_type(self) -> AccessTokenType:
        return self._access_token_type

    def set_access_token_type(self, token_type: AccessTokenType | str) -> None:
        """Set how tokens are exposed through :meth:`get_headers`."""
        if not isinstance(token_type, AccessTokenType):
            token_type = AccessTokenType(str(token_type).lower())
        self._access_token_type = token_type

    def get_headers(self, token: AccessToken | str | None = None) -> dict[str, str]:
        """Return the headers for an authenticated request.

        Empty unless the access token type is bearer and a token is given.
        """
        if token is None or self._access_token_type is not AccessTokenType.BEARER:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def get_resource_owner(self, token: AccessToken) -> ResourceOwner:
        """Fetch the profile of the user the token was issued to.

        Raises:
            IdentityProviderError: If the response carries an error object.
            ValueError: If the response is not a JSON object.
        """
        url = self.get_resource_owner_details_url(token)
        headers = {"Authorization": f"Bearer {token}"}
        headers.update(self.get_headers(token))

        response = self.session.get(
            url,
            headers=headers,
            withhold_token=True,
            timeout=self.config.timeout,
        )
        data = response.json()
        self._check_response(response, data)
        if not isinstance(data, Mapping):
            raise ValueError(
                "Invalid response received from Authorization Server. Expected JSON object."
            )

        logger.info("Fetched %s resource owner details.", self.definition.name)
        return self.definition.create_resource_owner(data, token)

    def set_transport(self, adapter: BaseAdapter) -> None:
        """Route every HTTP call of this client through ``adapter``."""
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)
