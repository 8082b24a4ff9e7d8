'''
**rrvalidator.dnssec**
----------------------

DNSSEC and SSHFP records: registries, boolean predicates, the strict
validators that raise a coded `DNSValidationError`, and key tag and
signature window helpers.

Note the predicates take `publicKey` and `signature` as hex while the
strict validators take them as base64.
See: `rrvalidator.dnssec._predicates` and `rrvalidator.dnssec._strict`.
'''
from rrvalidator.dnssec._enums import (
    DS_DIGEST_HEX_LENGTHS,
    RECOMMENDED_ALGORITHMS,
    RECOMMENDED_DIGEST_ALGORITHMS,
    RR_TYPE_MNEMONICS,
    VALID_DIGEST_TYPES,
    VALID_DNSSEC_ALGORITHMS,
    VALID_NSEC3_HASH_ALGORITHMS,
    VALID_SSH_ALGORITHMS,
    VALID_SSH_FINGERPRINT_TYPES,
    DigestAlgorithm,
    DNSKEYFlags,
    DNSSECAlgorithm,
    NSEC3HashAlgorithm,
    SSHAlgorithm,
    SSHFingerprintType,
)
from rrvalidator.dnssec._models import (
    DNSKEYData,
    DSData,
    NSEC3Data,
    NSEC3PARAMData,
    NSECData,
    RRSIGData,
)
from rrvalidator.dnssec._predicates import (
    is_dnskey_record,
    is_ds_record,
    is_nsec3_record,
    is_nsec_record,
    is_rrsig_record,
    is_sshfp_record,
    is_valid_digest_type,
    is_valid_dnssec_algorithm,
    is_valid_nsec3_hash_algorithm,
    is_valid_ssh_algorithm,
    is_valid_ssh_fingerprint_type,
)
from rrvalidator.dnssec._strict import (
    validate_dnskey,
    validate_ds,
    validate_nsec,
    validate_nsec3,
    validate_nsec3param,
    validate_rrsig,
)
from rrvalidator.dnssec._utils import (
    DEFAULT_CLOCK_SKEW,
    calculate_key_tag,
    is_recommended_algorithm,
    is_recommended_digest_algorithm,
    validate_signature_timestamps,
)

__all__ = [
    "DS_DIGEST_HEX_LENGTHS",
    "RECOMMENDED_ALGORITHMS",
    "RECOMMENDED_DIGEST_ALGORITHMS",
    "RR_TYPE_MNEMONICS",
    "VALID_DIGEST_TYPES",
    "VALID_DNSSEC_ALGORITHMS",
    "VALID_NSEC3_HASH_ALGORITHMS",
    "VALID_SSH_ALGORITHMS",
    "VALID_SSH_FINGERPRINT_TYPES",
    "DigestAlgorithm",
    "DNSKEYFlags",
    "DNSSECAlgorithm",
    "NSEC3HashAlgorithm",
    "SSHAlgorithm",
    "SSHFingerprintType",
    "DNSKEYData",
    "DSData",
    "NSEC3Data",
    "NSEC3PARAMData",
    "NSECData",
    "RRSIGData",
    "is_dnskey_record",
    "is_ds_record",
    "is_nsec3_record",
    "is_nsec_record",
    "is_rrsig_record",
    "is_sshfp_record",
    "is_valid_digest_type",
    "is_valid_dnssec_algorithm",
    "is_valid_nsec3_hash_algorithm",
    "is_valid_ssh_algorithm",
    "is_valid_ssh_fingerprint_type",
    "validate_dnskey",
    "validate_ds",
    "validate_nsec",
    "validate_nsec3",
    "validate_nsec3param",
    "validate_rrsig",
    "DEFAULT_CLOCK_SKEW",
    "calculate_key_tag",
    "is_recommended_algorithm",
    "is_recommended_digest_algorithm",
    "validate_signature_timestamps",
]
