from typing import Literal

from pydantic import BaseModel, Field


class MenuRules(BaseModel):
    title: str
    create_admin_label: str
    exit_label: str


class PasswordHashingRules(BaseModel):
    algorithm: Literal["argon2id"]
    default_work_factor: int = Field(ge=1)
    memory_cost: int = Field(ge=8)
    parallelism: int = Field(ge=1)
    hash_len: int = Field(ge=16)


class AuthRules(BaseModel):
    password_hashing: PasswordHashingRules


class OpsRules(BaseModel):
    default_database_url: str
    default_log_level: str = "WARNING"


class Rules(BaseModel):
    menu: MenuRules
    auth: AuthRules
    ops: OpsRules
