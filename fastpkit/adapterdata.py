"""Table of known sequencing adapter sequences and their names."""

# Names are '>'-prefixed and separated by ' | ' when one sequence is known
# under several names.
_NAME_SEPARATOR = " | "

# Adapters that do not belong to one of the barcoded families below.
_OTHER_ADAPTERS = (
    ("AGATCGGAAGAGCACACGTCTGAACTCCAGTCA", ">Illumina TruSeq Adapter Read 1"),
    ("AGATCGGAAGAGCGTCGTGTAGGGAAAGAGTGT", ">Illumina TruSeq Adapter Read 2"),
    ("GATCGTCGGACTGTAGAACTCTGAACGTGTAGA", ">Illumina Small RNA Adapter Read 2"),
    ("AATGATACGGCGACCACCGACAGGTTCAGAGTTCTACAGTCCGA",
     ">Illumina DpnII expression PCR Primer 2 | >Illumina NlaIII expression PCR Primer 2 | "
     ">Illumina Small RNA PCR Primer 2 | >Illumina DpnII Gex PCR Primer 2 | "
     ">Illumina NlaIII Gex PCR Primer 2"),
    ("AATGATACGGCGACCACCGAGATCTACACGTTCAGAGTTCTACAGTCCGA", ">Illumina RNA PCR Primer"),
    ("AATGATACGGCGACCACCGAGATCTACACTCTTTCCCTACACGACGCTCTTCCGATCT",
     ">TruSeq_Universal_Adapter | >PrefixPE/1 | >PCR_Primer1 | >Illumina Single End PCR Primer 1 | "
     ">Illumina Paried End PCR Primer 1 | >Illumina Multiplexing PCR Primer 1.01 | "
     ">TruSeq Universal Adapter | >TruSeq_Universal_Adapter | >PrefixPE/1 | >PCR_Primer1"),
    ("AATGATACGGCGACCACCGAGATCTACACTCTTTCCCTACACGACGCTCTTCCGATCTAGATCGGAAGAGCGGTTCAGCAGGAATGCCGAGACCGATCTCGTATGCCGTCTTCTGCTTG",
     ">pcr_dimer"),
    ("AATGATACGGCGACCACCGAGATCTACACTCTTTCCCTACACGACGCTCTTCCGATCTCAAGCAGAAGACGGCATACGAGCTCTTCCGATCT",
     ">PCR_Primers"),
    ("ACACTCTTTCCCTACACGACGCTCTTCCGATCT",
     ">Illumina Single End Sequencing Primer | >Illumina Paired End Adapter 1 | "
     ">Illumina Paried End Sequencing Primer 1 | >Illumina Multiplexing Adapter 2 | "
     ">Illumina Multiplexing Read1 Sequencing Primer"),
    ("AGATCGGAAGAGCACACGTCTGAACTCCAGTCAC",
     ">PE2_rc | >TruSeq3_IndexedAdapter | >PE2_rc | >TruSeq3_IndexedAdapter"),
    ("AGATCGGAAGAGCACACGTCTGAACTCCAGTCACATCACGATCTCGTATGCCGTCTTCTGCTTG", ">Reverse_adapter"),
    ("AGATCGGAAGAGCGGTTCAGCAGGAATGCCGAG", ">TruSeq2_PE_r"),
    ("AGATCGGAAGAGCGGTTCAGCAGGAATGCCGAGACCGATCTCGTATGCCGTCTTCTGCTTG", ">PCR_Primer2_rc"),
    ("AGATCGGAAGAGCGGTTCAGCAGGAATGCCGAGACCGATCTCGTATGCCGTCTTCTGCTTGAAA", ">PhiX_read1_adapter"),
    ("AGATCGGAAGAGCGTCGTGTAGGGAAAGAGTGTA",
     ">PE1_rc | >TruSeq3_UniversalAdapter | >PE1_rc | >TruSeq3_UniversalAdapter"),
    ("AGATCGGAAGAGCGTCGTGTAGGGAAAGAGTGTAGATCTCGGTGGTCGCCGTATCATT", ">PCR_Primer1_rc"),
    ("AGATCGGAAGAGCGTCGTGTAGGGAAAGAGTGTAGATCTCGGTGGTCGCCGTATCATTAAAAAA", ">PhiX_read2_adapter"),
    ("AGATCGGAAGAGCTCGTATGCCGTCTTCTGCTTG", ">TruSeq2_SE"),
    ("CAAGCAGAAGACGGCATACGAGATCGGTCTCGGCATTCCTGCTGAACCGCTCTTCCGATCT",
     ">PrefixPE/2 | >PCR_Primer2 | >Illumina Paired End PCR Primer 2 | >PrefixPE/2 | >PCR_Primer2"),
    ("CAAGCAGAAGACGGCATACGAGCTCTTCCGATCT",
     ">Illumina Single End Adapter 2 | >Illumina Single End PCR Primer 2"),
    ("CCACTACGCCTCCGCTTTCCTCTCTATGGGCAGTCGGTGAT", ">ABI Solid3 Adapter B"),
    ("CCGACAGGTTCAGAGTTCTACAGTCCGACATG",
     ">Illumina NlaIII expression Sequencing Primer | >Illumina NlaIII Gex Sequencing Primer"),
    ("CGACAGGTTCAGAGTTCTACAGTCCGACGATC",
     ">Illumina DpnII expression Sequencing Primer | >Illumina Small RNA Sequencing Primer | "
     ">Illumina DpnII Gex Sequencing Primer"),
    ("CGGTCTCGGCATTCCTGCTGAACCGCTCTTCCGATCT", ">Illumina Paired End Sequencing Primer 2"),
    ("CTAATACGACTCACTATAGGGCAAGCAGTGGTATCAACGCAGAGT", ">Clontech Universal Primer Mix Long"),
    ("CTGAGCGGGCTGGCAAGGCAGACCGATCTCGTATGCCGTCTTCTGCTTG", ">I7_Adapter_Nextera_No_Barcode"),
    ("CTGATGGCGCGAGGGAGGCGTGTAGATCTCGGTGGTCGCCGTATCATT", ">I5_Adapter_Nextera"),
    ("CTGCCCCGGGTTCCTCATTCTCTCAGCAGCATG", ">ABI Solid3 Adapter A"),
    ("CTGTCTCTTATACACATCTCCGAGCCCACGAGAC",
     ">I7_Nextera_Transposase_1 | >Trans2_rc | >I7_Nextera_Transposase_1 | >Trans2_rc"),
    ("CTGTCTCTTATACACATCTCTGAGCGGGCTGGCAAGGC", ">I7_Nextera_Transposase_2"),
    ("CTGTCTCTTATACACATCTCTGATGGCGCGAGGGAGGC", ">I5_Nextera_Transposase_2"),
    ("CTGTCTCTTATACACATCTGACGCTGCCGACGA",
     ">I5_Nextera_Transposase_1 | >Trans1_rc | >I5_Nextera_Transposase_1 | >Trans1_rc"),
    ("GATCGGAAGAGCACACGTCTGAACTCCAGTCAC",
     ">Nextera_LMP_Read1_External_Adapter | >Illumina Multiplexing Index Sequencing Primer"),
    ("GATCGGAAGAGCGGTTCAGCAGGAATGCCGAG", ">Illumina Paired End Adapter 2"),
    ("GATCGGAAGAGCGTCGTGTAGGGAAAGAGTGT", ">Nextera_LMP_Read2_External_Adapter"),
    ("GATCGGAAGAGCTCGTATGCCGTCTTCTGCTTG", ">Illumina Single End Adapter 1"),
    ("GTCTCGTGGGCTCGGAGATGTGTATAAGAGACAG", ">Trans2"),
    ("GTGACTGGAGTTCAGACGTGTGCTCTTCCGATCT",
     ">PrefixPE/2 | >PE2 | >Illumina Multiplexing PCR Primer 2.01 | "
     ">Illumina Multiplexing Read2 Sequencing Primer | >PrefixPE/2 | >PE2"),
    ("TACACTCTTTCCCTACACGACGCTCTTCCGATCT", ">PrefixPE/1 | >PE1 | >PrefixPE/1 | >PE1"),
    ("TCGGACTGTAGAACTCTGAACGTGTAGATCTCGGTGGTCGCCGTATCATT", ">RNA_PCR_Primer_(RP1)_part_#_15013198"),
    ("TCGTCGGCAGCGTCAGATGTGTATAAGAGACAG", ">Trans1"),
    ("TTTTTTTTTTAATGATACGGCGACCACCGAGATCTACAC", ">FlowCell1"),
    ("TTTTTTTTTTCAAGCAGAAGACGGCATACGA", ">FlowCell2"),
    ("AAGTCGGAGGCCAAGCGGTCTTAGGAAGACAA", ">MGI/BGI adapter (forward)"),
    ("AAGTCGGATCGTAGCCATGTCGTTCTGTGAGCCAAGGAGTTG", ">MGI/BGI adapter (reverse)"),
)

# RNA PCR primers: the barcode of index n is the n-th word.
_RNA_PCR_HEAD = "CAAGCAGAAGACGGCATACGAGAT"
_RNA_PCR_TAIL = "GTGACTGGAGTTCCTTGGCACCCGAGAATTCCA"
_ILLUMINA_PCR_TAIL = "GTGACTGGAGTTC"
_ILLUMINA_PCR_INDICES = 12
_RNA_PCR_BARCODES = """
CGTGAT ACATCG GCCTAA TGGTCA CACTGT ATTGGC GATCTG TCAAGT CTGATC AAGCTA GTAGCC TACAAG
TTGACT GGAACT TGACAT GGACGG CTCTAC GCGGAC TTTCAC GGCCAC CGAAAC CGTACG CCACTC GCTACC
ATCAGT GCTCAT AGGAAT CTTTTG TAGTTG CCGGTG ATCGTG TGAGTG CGCCTG GCCATG AAAATG TGTTGG
ATTCCG AGCTAG GTATAG TCTGAG GTCGTC CGATTA GCTGTA ATTATA GAATGA TCGGGA CTTCGA TGCCGA
""".split()

# RNA PCR primer index (RPI) adapters: the barcode of index n is the n-th word.
_RPI_HEAD = "TGGAATTCTCGGGTGCCAAGGAACTCCAGTCAC"
_RPI_TAIL = "ATCTCGTATGCCGTCTTCTGCTTG"
_RPI_BARCODES = """
ATCACG CGATGT TTAGGC TGACCA ACAGTG GCCAAT CAGATC ACTTGA GATCAG TAGCTT GGCTAC CTTGTA
AGTCAA AGTTCC ATGTCA CCGTCC GTAGAG GTCCGC GTGAAA GTGGCC GTTTCG CGTACG GAGTGG GGTAGC
ACTGAT ATGAGC ATTCCT CAAAAG CAACTA CACCGG CACGAT CACTCA CAGGCG CATGGC CATTTT CCAACA
CGGAAT CTAGCT CTATAC CTCAGA GACGAC TAATCG TACAGC TATAAT TCATTC TCCCGA TCGAAG TCGGCA
""".split()
_RPI_NAME_SUFFIX = {1: "_2,9"}

# TruSeq adapters: (insert, underscore-style label, comma-style label).
_TRUSEQ_HEAD = "GATCGGAAGAGCACACGTCTGAACTCCAGTCAC"
_TRUSEQ_TAIL = "TCTCGTATGCCGTCTTCTGCTTG"
_TRUSEQ = (
    ("ACAGTGA", "5", "5"), ("ACTGATATA", "25", None), ("ACTGATA", None, "25"),
    ("ACTTGAA", "8", "8"), ("AGTCAACAA", "13", None), ("AGTCAAC", None, "13"),
    ("AGTTCCGTA", "14", None), ("AGTTCCG", None, "14"), ("ATCACGA", "1_6", "1"),
    ("ATGTCAGAA", "15", None), ("ATGTCAG", None, "15"), ("ATTCCTTTA", "27", None),
    ("ATTCCTT", None, "27"), ("CAGATCA", "7", "7"), ("CCACTCT", None, "23"),
    ("CCGTCCCGA", "16", None), ("CCGTCCC", None, "16"), ("CGATGTA", "2", "2"),
    ("CGTACGTAA", "22", None), ("CGTACGT", None, "22"), ("CTTGTAA", "12", "12"),
    ("GAGTGGATA", "23", None), ("GATCAGA", "9", "9"), ("GCCAATA", "6", "6"),
    ("GGCTACA", "11", "11"), ("GTCCGCACA", "18_7", None), ("GTCCGCA", None, "18"),
    ("GTGAAACGA", "19", None), ("GTGAAAC", None, "19"), ("GTGGCCTTA", "20", None),
    ("GTGGCCT", None, "20"), ("GTTTCGGAA", "21", None), ("GTTTCGG", None, "21"),
    ("TAGCTTA", "10", "10"), ("TGACCAA", "4", "4"), ("TTAGGCA", "3", "3"),
)

# Nextera primers are listed under the enrichment name, the index-kit name,
# or both (each twice).
_ENRICH, _KIT, _BOTH = range(3)

_I7_HEAD = "CCGAGCCCACGAGAC"
_I7_TAIL = "ATCTCGTATGCCGTCTTCTGCTTG"
_I7 = (
    ("AAGAGGCA", 711, _BOTH), ("ACTCGCTA", 716, _KIT), ("ACTGAGCG", 724, _KIT),
    ("AGGCAGAA", 703, _BOTH), ("ATCTCAGG", 715, _KIT), ("ATGCGCAG", 722, _KIT),
    ("CAGAGAGG", 708, _ENRICH), ("CCTAAGAC", 726, _KIT), ("CGAGGCTG", 710, _BOTH),
    ("CGATCAGT", 727, _KIT), ("CGGAGCCT", 720, _KIT), ("CGTACTAG", 702, _BOTH),
    ("CTCTCTAC", 707, _BOTH), ("GCGTAGTA", 719, _KIT), ("GCTACGCT", 709, _ENRICH),
    ("GCTCATGA", 714, _KIT), ("GGACTCCT", 705, _BOTH), ("GGAGCTAC", 718, _KIT),
    ("GTAGAGGA", 712, _BOTH), ("TAAGGCGA", 701, _BOTH), ("TACGCTGC", 721, _KIT),
    ("TAGCGCTC", 723, _KIT), ("TAGGCATG", 706, _BOTH), ("TCCTGAGC", 704, _BOTH),
    ("TCGACGTC", 729, _KIT), ("TGCAGCTA", 728, _KIT),
)

_I5_HEAD = "GACGCTGCCGACGA"
_I5_TAIL = "GTGTAGATCTCGGTGGTCGCCGTATCATT"
_I5 = (
    ("ACTCTAGG", 516, _KIT), ("AGAGGATA", 503, _BOTH), ("AGCTAGAA", 515, _KIT),
    ("AGGCTTAG", 508, _BOTH), ("ATAGAGAG", 502, _BOTH), ("ATAGCCTT", 520, _KIT),
    ("ATTAGACG", 510, _KIT), ("CGGAGAGA", 511, _KIT), ("CTAGTCGA", 513, _KIT),
    ("CTCCTTAC", 505, _BOTH), ("CTTAATAG", 518, _KIT), ("GCGATCTA", 501, _ENRICH),
    ("TAAGGCTC", 521, _KIT), ("TACTCCTT", 507, _BOTH), ("TATGCAGT", 506, _BOTH),
    ("TCGCATAA", 522, _KIT), ("TCTACTCT", 504, _ENRICH), ("TCTTACGC", 517, _BOTH),
)


def _nextera_names(kind: int, enrichment: str, kit: str) -> str:
    if kind == _ENRICH:
        parts = [enrichment]
    elif kind == _KIT:
        parts = [kit]
    else:
        parts = [enrichment, kit, enrichment, kit]
    return _NAME_SEPARATOR.join(parts)


def _barcoded_families():
    """Yield (sequence, names) for every adapter built from a barcode."""
    for index, barcode in enumerate(_RNA_PCR_BARCODES, start=1):
        yield _RNA_PCR_HEAD + barcode + _RNA_PCR_TAIL, f">RNA PCR Primer, Index {index}"
        if index <= _ILLUMINA_PCR_INDICES:
            yield (_RNA_PCR_HEAD + barcode + _ILLUMINA_PCR_TAIL,
                   f">Illumina PCR Primer Index {index}")

    for index, barcode in enumerate(_RPI_BARCODES, start=1):
        suffix = _RPI_NAME_SUFFIX.get(index, "")
        yield (_RPI_HEAD + barcode + _RPI_TAIL,
               f">RNA_PCR_Primer_Index_{index}_(RPI{index}){suffix}")

    for insert, underscore_label, comma_label in _TRUSEQ:
        names = []
        if underscore_label:
            names.append(f">TruSeq_Adapter_Index_{underscore_label}")
        if comma_label:
            names.append(f">TruSeq Adapter, Index {comma_label}")
        yield _TRUSEQ_HEAD + insert + _TRUSEQ_TAIL, _NAME_SEPARATOR.join(names)

    for barcode, number, kind in _I7:
        yield _I7_HEAD + barcode + _I7_TAIL, _nextera_names(
            kind,
            f">I7_Primer_Nextera_XT_and_Nextera_Enrichment_N{number}",
            f">I7_Primer_Nextera_XT_Index_Kit_v2_N{number}",
        )

    for barcode, number, kind in _I5:
        yield _I5_HEAD + barcode + _I5_TAIL, _nextera_names(
            kind,
            f">I5_Primer_Nextera_XT_and_Nextera_Enrichment_[N/S/E]{number}",
            f">I5_Primer_Nextera_XT_Index_Kit_v2_S{number}",
        )


def primary_adapters() -> dict:
    """Return a new dict mapping each known adapter sequence to its names.

    Keys are upper-case nucleotide sequences in sorted order; values are the
    '>'-prefixed names, joined by ' | ' where a sequence has several.
    """
    entries = list(_OTHER_ADAPTERS)
    entries.extend(_barcoded_families())
    return dict(sorted(entries))