from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel
from solders.instruction import Instruction

from solapi.encoding import encode_base64

T = TypeVar("T")


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Requests. Every field is optional here so that presence is checked by
# solapi.validation, before any decoding, rather than by pydantic. Numeric
# fields accept JSON integers only; strings, booleans and floats are a
# malformed body.


class SignMessageRequest(_CamelModel):
    message: Optional[str] = None
    secret: Optional[str] = None


class VerifyMessageRequest(_CamelModel):
    message: Optional[str] = None
    signature: Optional[str] = None
    public_key: Optional[str] = None


class SendSolRequest(_CamelModel):
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    lamports: Optional[StrictInt] = None


class SendTokenRequest(_CamelModel):
    destination: Optional[str] = None
    mint: Optional[str] = None
    owner: Optional[str] = None
    amount: Optional[StrictInt] = None


class CreateTokenRequest(_CamelModel):
    mint: Optional[str] = None
    mint_authority: Optional[str] = None
    decimals: Optional[StrictInt] = None
    freeze_authority: Optional[str] = None


class MintTokenRequest(_CamelModel):
    mint: Optional[str] = None
    destination: Optional[str] = None
    authority: Optional[str] = None
    amount: Optional[StrictInt] = None


# Response payloads


class KeypairData(_CamelModel):
    public_key: str
    secret: str


class SignMessageData(_CamelModel):
    signature: str
    public_key: str
    message: str


class VerifyMessageData(_CamelModel):
    valid: bool
    message: str
    public_key: str


class AccountMetaData(_CamelModel):
    """An account referenced by an instruction"""

    pubkey: str
    is_signer: bool
    is_writable: bool


class InstructionPayload(_CamelModel):
    """Wire form of an instruction: program id, ordered accounts, base64 data"""

    program_id: str
    accounts: list[AccountMetaData]
    instruction_data: str

    @classmethod
    def from_instruction(cls, ix: Instruction) -> InstructionPayload:
        return cls(
            program_id=str(ix.program_id),
            accounts=[
                AccountMetaData(
                    pubkey=str(meta.pubkey),
                    is_signer=meta.is_signer,
                    is_writable=meta.is_writable,
                )
                for meta in ix.accounts
            ],
            instruction_data=encode_base64(bytes(ix.data)),
        )


class ApiResponse(_CamelModel, Generic[T]):
    """Tagged result returned by every operation.

    Success carries `data`, failure carries an `error` message; never both.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: T) -> ApiResponse[T]:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> ApiResponse[T]:
        return cls(success=False, error=error)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
