'''
**rrvalidator.records**
-----------------------

Record shapes, the boolean predicates for the traditional record types,
dispatch by `type` and conversion from dnspython rdata.
See: `rrvalidator.records._predicates` and `rrvalidator.records._dispatch`.
'''
from rrvalidator.records._dispatch import (
    RECORD_PREDICATES,
    RECORD_REQUIREMENTS,
    is_dns_record,
    requirements_hint,
    validate_dns_record,
)
from rrvalidator.records._models import (
    SUPPORTED_RECORD_TYPES,
    AAAARecord,
    ANYRecord,
    ARecord,
    CAARecord,
    CNAMERecord,
    DNSKEYRecord,
    DNSQueryResult,
    DNSQuestion,
    DNSRecord,
    DNSRecordType,
    DSRecord,
    MXRecord,
    NAPTRRecord,
    NSEC3Record,
    NSECRecord,
    NSRecord,
    PTRRecord,
    RRSIGRecord,
    SOARecord,
    SRVRecord,
    SSHFPRecord,
    TLSARecord,
    TXTRecord,
    ValidationResult,
)
from rrvalidator.records._predicates import (
    is_a_record,
    is_aaaa_record,
    is_any_record,
    is_caa_record,
    is_cname_record,
    is_mx_record,
    is_naptr_record,
    is_ns_record,
    is_ptr_record,
    is_soa_record,
    is_srv_record,
    is_tlsa_record,
    is_txt_record,
)
from rrvalidator.records._rdata import parse_rdata, parse_rrset

__all__ = [
    "RECORD_PREDICATES",
    "RECORD_REQUIREMENTS",
    "is_dns_record",
    "requirements_hint",
    "validate_dns_record",
    "SUPPORTED_RECORD_TYPES",
    "AAAARecord",
    "ANYRecord",
    "ARecord",
    "CAARecord",
    "CNAMERecord",
    "DNSKEYRecord",
    "DNSQueryResult",
    "DNSQuestion",
    "DNSRecord",
    "DNSRecordType",
    "DSRecord",
    "MXRecord",
    "NAPTRRecord",
    "NSEC3Record",
    "NSECRecord",
    "NSRecord",
    "PTRRecord",
    "RRSIGRecord",
    "SOARecord",
    "SRVRecord",
    "SSHFPRecord",
    "TLSARecord",
    "TXTRecord",
    "ValidationResult",
    "is_a_record",
    "is_aaaa_record",
    "is_any_record",
    "is_caa_record",
    "is_cname_record",
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
]
