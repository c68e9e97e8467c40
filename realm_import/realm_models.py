from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Representation(BaseModel):
    # Realm files use Keycloak's camelCase keys; anything unknown is rejected
    model_config = ConfigDict(extra="forbid", frozen=True, alias_generator=to_camel)


class CredentialRepresentation(_Representation):
    type: Optional[str] = None
    value: Optional[str] = None
    temporary: Optional[bool] = None
    user_label: Optional[str] = None


class UserRepresentation(_Representation):
    id: Optional[str] = None
    username: Optional[str] = None
    enabled: Optional[bool] = None
    email: Optional[str] = None
    email_verified: Optional[bool] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    attributes: Optional[Dict[str, List[str]]] = None
    credentials: Optional[List[CredentialRepresentation]] = None
    required_actions: Optional[List[str]] = None
    realm_roles: Optional[List[str]] = None
    client_roles: Optional[Dict[str, List[str]]] = None
    groups: Optional[List[str]] = None
    service_account_client_id: Optional[str] = None


class ProtocolMapperRepresentation(_Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    protocol: Optional[str] = None
    protocol_mapper: Optional[str] = None
    config: Optional[Dict[str, str]] = None


class ClientRepresentation(_Representation):
    id: Optional[str] = None
    client_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    protocol: Optional[str] = None
    root_url: Optional[str] = None
    base_url: Optional[str] = None
    admin_url: Optional[str] = None
    secret: Optional[str] = None
    public_client: Optional[bool] = None
    bearer_only: Optional[bool] = None
    standard_flow_enabled: Optional[bool] = None
    implicit_flow_enabled: Optional[bool] = None
    direct_access_grants_enabled: Optional[bool] = None
    service_accounts_enabled: Optional[bool] = None
    redirect_uris: Optional[List[str]] = None
    web_origins: Optional[List[str]] = None
    attributes: Optional[Dict[str, str]] = None
    protocol_mappers: Optional[List[ProtocolMapperRepresentation]] = None
    default_client_scopes: Optional[List[str]] = None
    optional_client_scopes: Optional[List[str]] = None


class RoleRepresentation(_Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    composite: Optional[bool] = None
    client_role: Optional[bool] = None
    attributes: Optional[Dict[str, List[str]]] = None


class RolesRepresentation(_Representation):
    realm: Optional[List[RoleRepresentation]] = None
    client: Optional[Dict[str, List[RoleRepresentation]]] = None


class GroupRepresentation(_Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    path: Optional[str] = None
    attributes: Optional[Dict[str, List[str]]] = None
    realm_roles: Optional[List[str]] = None
    client_roles: Optional[Dict[str, List[str]]] = None
    sub_groups: Optional[List["GroupRepresentation"]] = None


class ClientScopeRepresentation(_Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    protocol: Optional[str] = None
    attributes: Optional[Dict[str, str]] = None
    protocol_mappers: Optional[List[ProtocolMapperRepresentation]] = None


class IdentityProviderRepresentation(_Representation):
    alias: Optional[str] = None
    display_name: Optional[str] = None
    provider_id: Optional[str] = None
    enabled: Optional[bool] = None
    trust_email: Optional[bool] = None
    first_broker_login_flow_alias: Optional[str] = None
    config: Optional[Dict[str, str]] = None


class RealmImport(_Representation):
    """
    A single realm-configuration document.
    Every field is optional; only unknown keys make a document invalid.
    """

    id: Optional[str] = None
    realm: Optional[str] = None
    display_name: Optional[str] = None
    display_name_html: Optional[str] = None
    enabled: Optional[bool] = None
    ssl_required: Optional[str] = None

    # Login behaviour
    registration_allowed: Optional[bool] = None
    registration_email_as_username: Optional[bool] = None
    remember_me: Optional[bool] = None
    verify_email: Optional[bool] = None
    login_with_email_allowed: Optional[bool] = None
    duplicate_emails_allowed: Optional[bool] = None
    reset_password_allowed: Optional[bool] = None
    edit_username_allowed: Optional[bool] = None
    brute_force_protected: Optional[bool] = None

    # Tokens and sessions (seconds)
    access_token_lifespan: Optional[int] = None
    sso_session_idle_timeout: Optional[int] = None
    sso_session_max_lifespan: Optional[int] = None

    # Themes and i18n
    login_theme: Optional[str] = None
    account_theme: Optional[str] = None
    admin_theme: Optional[str] = None
    email_theme: Optional[str] = None
    internationalization_enabled: Optional[bool] = None
    supported_locales: Optional[List[str]] = None
    default_locale: Optional[str] = None

    smtp_server: Optional[Dict[str, str]] = None
    attributes: Optional[Dict[str, str]] = None

    users: Optional[List[UserRepresentation]] = None
    clients: Optional[List[ClientRepresentation]] = None
    roles: Optional[RolesRepresentation] = None
    groups: Optional[List[GroupRepresentation]] = None
    default_roles: Optional[List[str]] = None
    client_scopes: Optional[List[ClientScopeRepresentation]] = None
    default_default_client_scopes: Optional[List[str]] = None
    default_optional_client_scopes: Optional[List[str]] = None
    identity_providers: Optional[List[IdentityProviderRepresentation]] = None
    required_credentials: Optional[List[str]] = None
