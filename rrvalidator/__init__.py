'''
**rrvalidator**
---------------

Validation of DNS resource records held as plain mappings, A through
SSHFP including the DNSSEC types.

There are three ways to validate, pick by how much you need to know:

- `is_*_record` / `is_dns_record`: a yes or no, never raises.
- `validate_*_record` / `validate_dns_record`: a `ValidationResult`
  listing every problem as a message, never raises.
- `validate_rrsig`, `validate_dnskey`, ...: raise a
  `DNSValidationError` whose `code` names the first failed check, and
  return a normalized record otherwise.

See: `rrvalidator.records`, `rrvalidator.dnssec` and `rrvalidator.enhanced`.
'''
from rrvalidator._fields import (
    MAX_TTL,
    MAX_UINT8,
    MAX_UINT16,
    is_valid_caa_flags,
    is_valid_hex_string,
    is_valid_naptr_flags,
    is_valid_port,
    is_valid_priority,
    is_valid_text_record,
    is_valid_tlsa_matching_type,
    is_valid_tlsa_selector,
    is_valid_tlsa_usage,
    is_valid_ttl,
    is_valid_weight,
)
from rrvalidator.compat import (
    from_node_resolve_any,
    from_node_txt,
    is_node_soa_shape,
    is_node_tlsa_shape,
    normalize_soa,
    normalize_tlsa,
    normalized,
    to_any_record,
    to_node_txt,
)
from rrvalidator.dnssec import (
    DigestAlgorithm,
    DNSKEYData,
    DNSKEYFlags,
    DNSSECAlgorithm,
    DSData,
    NSEC3Data,
    NSEC3HashAlgorithm,
    NSEC3PARAMData,
    NSECData,
    RR_TYPE_MNEMONICS,
    RRSIGData,
    SSHAlgorithm,
    SSHFingerprintType,
    calculate_key_tag,
    is_dnskey_record,
    is_ds_record,
    is_nsec3_record,
    is_nsec_record,
    is_recommended_algorithm,
    is_recommended_digest_algorithm,
    is_rrsig_record,
    is_sshfp_record,
    is_valid_digest_type,
    is_valid_dnssec_algorithm,
    is_valid_nsec3_hash_algorithm,
    is_valid_ssh_algorithm,
    is_valid_ssh_fingerprint_type,
    validate_dnskey,
    validate_ds,
    validate_nsec,
    validate_nsec3,
    validate_nsec3param,
    validate_rrsig,
    validate_signature_timestamps,
)
from rrvalidator.enhanced import (
    get_validation_suggestions,
    validate_a_record,
    validate_aaaa_record,
    validate_mx_record,
)
from rrvalidator.errors import (
    NODE_DNS_ERROR_CODES,
    DetailedValidationResult,
    DNSValidationError,
    InvalidFieldValueError,
    InvalidQueryStructureError,
    InvalidRecordTypeError,
    MalformedRecordError,
    MissingRequiredFieldError,
    ValidationContext,
    ValidationErrorFactory,
    is_node_dns_error_code,
)
from rrvalidator.performance import (
    PatternCache,
    ValidationMetrics,
    ValidationPatterns,
    ValidationPerformanceTracker,
    fast_pre_validate,
    get_optional_field,
    get_required_field,
    is_plain_object,
    is_valid_integer_in_range,
    track_performance,
)
from rrvalidator.query import (
    is_valid_dns_query_result,
    is_valid_dns_record,
    is_valid_record_type,
    validate_dns_response,
)
from rrvalidator.records import (
    SUPPORTED_RECORD_TYPES,
    DNSQueryResult,
    DNSRecord,
    DNSRecordType,
    ValidationResult,
    is_a_record,
    is_aaaa_record,
    is_any_record,
    is_caa_record,
    is_cname_record,
    is_dns_record,
    is_mx_record,
    is_naptr_record,
    is_ns_record,
    is_ptr_record,
    is_soa_record,
    is_srv_record,
    is_tlsa_record,
    is_txt_record,
    parse_rdata,
    parse_rrset,
    validate_dns_record,
)

__all__ = [
    "MAX_TTL",
    "MAX_UINT8",
    "MAX_UINT16",
    "is_valid_caa_flags",
    "is_valid_hex_string",
    "is_valid_naptr_flags",
    "is_valid_port",
    "is_valid_priority",
    "is_valid_text_record",
    "is_valid_tlsa_matching_type",
    "is_valid_tlsa_selector",
    "is_valid_tlsa_usage",
    "is_valid_ttl",
    "is_valid_weight",
    "from_node_resolve_any",
    "from_node_txt",
    "is_node_soa_shape",
    "is_node_tlsa_shape",
    "normalize_soa",
    "normalize_tlsa",
    "normalized",
    "to_any_record",
    "to_node_txt",
    "DigestAlgorithm",
    "DNSKEYData",
    "DNSKEYFlags",
    "DNSSECAlgorithm",
    "DSData",
    "NSEC3Data",
    "NSEC3HashAlgorithm",
    "NSEC3PARAMData",
    "NSECData",
    "RR_TYPE_MNEMONICS",
    "RRSIGData",
    "SSHAlgorithm",
    "SSHFingerprintType",
    "calculate_key_tag",
    "is_dnskey_record",
    "is_ds_record",
    "is_nsec3_record",
    "is_nsec_record",
    "is_recommended_algorithm",
    "is_recommended_digest_algorithm",
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
    "validate_signature_timestamps",
    "get_validation_suggestions",
    "validate_a_record",
    "validate_aaaa_record",
    "validate_mx_record",
    "NODE_DNS_ERROR_CODES",
    "DetailedValidationResult",
    "DNSValidationError",
    "InvalidFieldValueError",
    "InvalidQueryStructureError",
    "InvalidRecordTypeError",
    "MalformedRecordError",
    "MissingRequiredFieldError",
    "ValidationContext",
    "ValidationErrorFactory",
    "is_node_dns_error_code",
    "PatternCache",
    "ValidationMetrics",
    "ValidationPatterns",
    "ValidationPerformanceTracker",
    "fast_pre_validate",
    "get_optional_field",
    "get_required_field",
    "is_plain_object",
    "is_valid_integer_in_range",
    "track_performance",
    "is_valid_dns_query_result",
    "is_valid_dns_record",
    "is_valid_record_type",
    "validate_dns_response",
    "SUPPORTED_RECORD_TYPES",
    "DNSQueryResult",
    "DNSRecord",
    "DNSRecordType",
    "ValidationResult",
    "is_a_record",
    "is_aaaa_record",
    "is_any_record",
    "is_caa_record",
    "is_cname_record",
    "is_dns_record",
    "is_mx_record",
    "is_naptr_record",
    "is_ns_record",
    "is_ptr_record",
    "is_soa_record",
    "is_srv_record",
    "is_tlsa_record",
    "is_txt_record",
    "parse_rdata",
    "parse_rrset",
    "validate_dns_record",
]
