"""Operations behind the HTTP API.

Every function here is the result boundary of the core: it validates its
request, does the work and returns an :class:`~solapi.types.ApiResponse`.
Validation and build failures come back as ``success=False`` responses and
never escape as exceptions.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, TypeVar

from solapi.errors import SolapiError
from solapi.svm.address import derive_associated_address
from solapi.svm.instructions import (
    build_initialize_mint,
    build_mint_to,
    build_sol_transfer,
    build_token_transfer,
)
from solapi.svm.signing import encode_signature, sign, verify
from solapi.svm.wallet import generate_keypair
from solapi.types import (
    ApiResponse,
    CreateTokenRequest,
    InstructionPayload,
    KeypairData,
    MintTokenRequest,
    SendSolRequest,
    SendTokenRequest,
    SignMessageData,
    SignMessageRequest,
    VerifyMessageData,
    VerifyMessageRequest,
)
from solapi.validation import (
    decode_base58_fields,
    encode_message,
    is_missing,
    require_fields,
    to_keypair,
    to_pubkey,
    to_signature,
    validate_amount,
    validate_decimals,
    validate_pubkeys,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., ApiResponse])


def api_operation(func: F) -> F:
    """Turn SolapiError raised by an operation into a failure response."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SolapiError as e:
            logger.info("%s rejected (%s): %s", func.__name__, e.kind.value, e.message)
            return ApiResponse.fail(e.message)

    return wrapper  # type: ignore[return-value]


@api_operation
def create_keypair() -> ApiResponse[KeypairData]:
    """Generate a new keypair.

    Returns:
        Response with the base58 public key and base58 64-byte secret.
    """
    keypair = generate_keypair()
    return ApiResponse[KeypairData].ok(
        KeypairData(public_key=keypair.address, secret=keypair.to_base58())
    )


@api_operation
def sign_message(request: SignMessageRequest) -> ApiResponse[SignMessageData]:
    """Sign the UTF-8 bytes of a message with a base58 secret key.

    Returns:
        Response with the base58 signature, the signer's public key and the
        message.
    """
    require_fields(request, "message", "secret")
    message = encode_message(request.message)
    decoded = decode_base58_fields({"secret": request.secret})
    keypair = to_keypair(decoded["secret"], "secret")

    signature = sign(keypair, message)
    return ApiResponse[SignMessageData].ok(
        SignMessageData(
            signature=encode_signature(signature),
            public_key=keypair.address,
            message=request.message,
        )
    )


@api_operation
def verify_message(request: VerifyMessageRequest) -> ApiResponse[VerifyMessageData]:
    """Verify a base58 signature over the UTF-8 bytes of a message.

    A signature that does not match is reported as ``valid=False`` inside a
    successful response.
    """
    require_fields(request, "message", "signature", "public_key")
    message = encode_message(request.message)
    decoded = decode_base58_fields(
        {"publicKey": request.public_key, "signature": request.signature}
    )
    pubkey = to_pubkey(decoded["publicKey"], "publicKey")
    signature = to_signature(decoded["signature"], "signature")

    valid = verify(pubkey, message, signature)
    return ApiResponse[VerifyMessageData].ok(
        VerifyMessageData(valid=valid, message=request.message, public_key=str(pubkey))
    )


@api_operation
def send_sol(request: SendSolRequest) -> ApiResponse[InstructionPayload]:
    """Build a system program SOL transfer instruction."""
    require_fields(request, "from_", "to", "lamports")
    keys = validate_pubkeys({"from": request.from_, "to": request.to})
    lamports = validate_amount(request.lamports, "lamports")

    ix = build_sol_transfer(keys["from"], keys["to"], lamports)
    return ApiResponse[InstructionPayload].ok(InstructionPayload.from_instruction(ix))


@api_operation
def send_token(request: SendTokenRequest) -> ApiResponse[InstructionPayload]:
    """Build an SPL token transfer instruction.

    Both token accounts are the associated token accounts of the given
    wallets for the mint: the source belongs to ``owner``, the destination
    to ``destination``. ``owner`` signs as the authority.
    """
    require_fields(request, "destination", "mint", "owner", "amount")
    keys = validate_pubkeys(
        {
            "destination": request.destination,
            "mint": request.mint,
            "owner": request.owner,
        }
    )
    amount = validate_amount(request.amount, "amount")

    source_ata = derive_associated_address(keys["owner"], keys["mint"])
    dest_ata = derive_associated_address(keys["destination"], keys["mint"])
    ix = build_token_transfer(
        source=source_ata,
        dest=dest_ata,
        owner=keys["owner"],
        amount=amount,
    )
    return ApiResponse[InstructionPayload].ok(InstructionPayload.from_instruction(ix))


@api_operation
def create_token(request: CreateTokenRequest) -> ApiResponse[InstructionPayload]:
    """Build an InitializeMint instruction."""
    require_fields(request, "mint", "mint_authority", "decimals")
    fields = {"mint": request.mint, "mintAuthority": request.mint_authority}
    if not is_missing(request.freeze_authority):
        fields["freezeAuthority"] = request.freeze_authority
    keys = validate_pubkeys(fields)
    decimals = validate_decimals(request.decimals)

    ix = build_initialize_mint(
        mint=keys["mint"],
        mint_authority=keys["mintAuthority"],
        freeze_authority=keys.get("freezeAuthority"),
        decimals=decimals,
    )
    return ApiResponse[InstructionPayload].ok(InstructionPayload.from_instruction(ix))


@api_operation
def mint_token(request: MintTokenRequest) -> ApiResponse[InstructionPayload]:
    """Build a MintTo instruction into the destination wallet's associated token account."""
    require_fields(request, "mint", "destination", "authority", "amount")
    keys = validate_pubkeys(
        {
            "mint": request.mint,
            "destination": request.destination,
            "authority": request.authority,
        }
    )
    amount = validate_amount(request.amount, "amount")

    dest_ata = derive_associated_address(keys["destination"], keys["mint"])
    ix = build_mint_to(
        mint=keys["mint"],
        dest=dest_ata,
        authority=keys["authority"],
        amount=amount,
    )
    return ApiResponse[InstructionPayload].ok(InstructionPayload.from_instruction(ix))
