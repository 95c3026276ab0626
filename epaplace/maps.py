"""Character tables for nucleotide and amino-acid alphabets."""

# Position is the 4-bit ACGT encoding of the IUPAC code, e.g. 'T' = 0001.
NT_MAP = "-TGKCYSBAWRDMHVN"

AA_MAP = "ACDEFGHIKLMNPQRSTVWY-XBZ"

NT_MAP_SIZE = len(NT_MAP)
AA_MAP_SIZE = len(AA_MAP)