'''
DNSSEC registries (RFC 8624 and the IANA tables).

The enums describe every registered value, the `VALID_*` sets are what
the record predicates actually accept.
'''
import enum
from typing import Final


class DNSSECAlgorithm(enum.IntEnum):
    RSAMD5 = 1  # deprecated
    DH = 2
    DSA = 3
    RSASHA1 = 5
    DSA_NSEC3_SHA1 = 6
    RSASHA1_NSEC3_SHA1 = 7
    RSASHA256 = 8
    RSASHA512 = 10
    ECC_GOST = 12
    ECDSAP256SHA256 = 13
    ECDSAP384SHA384 = 14
    ED25519 = 15
    ED448 = 16


class DigestAlgorithm(enum.IntEnum):
    SHA1 = 1
    SHA256 = 2
    GOST = 3
    SHA384 = 4


class NSEC3HashAlgorithm(enum.IntEnum):
    SHA1 = 1


class DNSKEYFlags(enum.IntFlag):
    SEP = 0x0001
    REVOKE = 0x0080
    ZONE_KEY = 0x0100


class SSHAlgorithm(enum.IntEnum):
    RSA = 1
    DSS = 2
    ECDSA = 3
    ED25519 = 4
    ED448 = 6


class SSHFingerprintType(enum.IntEnum):
    SHA1 = 1
    SHA256 = 2


# DH (2) is registered but cannot sign
VALID_DNSSEC_ALGORITHMS: Final = frozenset({1, 3, 5, 6, 7, 8, 10, 12, 13, 14, 15, 16})
VALID_DIGEST_TYPES: Final = frozenset(int(d) for d in DigestAlgorithm)
VALID_NSEC3_HASH_ALGORITHMS: Final = frozenset(int(h) for h in NSEC3HashAlgorithm)
VALID_SSH_ALGORITHMS: Final = frozenset(int(a) for a in SSHAlgorithm)
VALID_SSH_FINGERPRINT_TYPES: Final = frozenset(int(f) for f in SSHFingerprintType)

RECOMMENDED_ALGORITHMS: Final = frozenset({
    DNSSECAlgorithm.RSASHA256,
    DNSSECAlgorithm.RSASHA512,
    DNSSECAlgorithm.ECDSAP256SHA256,
    DNSSECAlgorithm.ECDSAP384SHA384,
    DNSSECAlgorithm.ED25519,
    DNSSECAlgorithm.ED448,
})
RECOMMENDED_DIGEST_ALGORITHMS: Final = frozenset({
    DigestAlgorithm.SHA256,
    DigestAlgorithm.SHA384,
})

# hex characters expected for each DS digest type
DS_DIGEST_HEX_LENGTHS: Final = {
    DigestAlgorithm.SHA1: 40,
    DigestAlgorithm.SHA256: 64,
    DigestAlgorithm.GOST: 64,
    DigestAlgorithm.SHA384: 96,
}

# type mnemonics accepted in NSEC / NSEC3 type lists
RR_TYPE_MNEMONICS: Final = frozenset({
    'A', 'NS', 'MD', 'MF', 'CNAME', 'SOA', 'MB', 'MG', 'MR', 'NULL',
    'WKS', 'PTR', 'HINFO', 'MINFO', 'MX', 'TXT', 'RP', 'AFSDB', 'X25',
    'ISDN', 'RT', 'NSAP', 'NSAP-PTR', 'SIG', 'KEY', 'PX', 'GPOS', 'AAAA',
    'LOC', 'NXT', 'EID', 'NIMLOC', 'SRV', 'ATMA', 'NAPTR', 'KX', 'CERT',
    'A6', 'DNAME', 'SINK', 'OPT', 'APL', 'DS', 'SSHFP', 'IPSECKEY',
    'RRSIG', 'NSEC', 'DNSKEY', 'DHCID', 'NSEC3', 'NSEC3PARAM', 'TLSA',
    'HIP', 'NINFO', 'RKEY', 'TALINK', 'CDS', 'CDNSKEY', 'OPENPGPKEY',
    'CSYNC', 'ZONEMD', 'SVCB', 'HTTPS',
})
