"""Category, sort criterion and sort order values accepted by the arXiv API."""

from enum import Enum


class _StrValueEnum(str, Enum):
    """String enum whose ``str()`` is its wire value."""

    def __str__(self) -> str:
        return self.value


class Category(_StrValueEnum):
    """arXiv subject categories."""

    # Computer Science
    CS_AI = "cs.AI"
    CS_AR = "cs.AR"
    CS_CC = "cs.CC"
    CS_CE = "cs.CE"
    CS_CG = "cs.CG"
    CS_CL = "cs.CL"
    CS_CR = "cs.CR"
    CS_CV = "cs.CV"
    CS_CY = "cs.CY"
    CS_DB = "cs.DB"
    CS_DC = "cs.DC"
    CS_DL = "cs.DL"
    CS_DM = "cs.DM"
    CS_DS = "cs.DS"
    CS_ET = "cs.ET"
    CS_FL = "cs.FL"
    CS_GL = "cs.GL"
    CS_GR = "cs.GR"
    CS_GT = "cs.GT"
    CS_HC = "cs.HC"
    CS_IR = "cs.IR"
    CS_IT = "cs.IT"
    CS_LG = "cs.LG"
    CS_LO = "cs.LO"
    CS_MA = "cs.MA"
    CS_MM = "cs.MM"
    CS_MS = "cs.MS"
    CS_NA = "cs.NA"
    CS_NE = "cs.NE"
    CS_NI = "cs.NI"
    CS_OH = "cs.OH"
    CS_OS = "cs.OS"
    CS_PF = "cs.PF"
    CS_PL = "cs.PL"
    CS_RO = "cs.RO"
    CS_SC = "cs.SC"
    CS_SD = "cs.SD"
    CS_SE = "cs.SE"
    CS_SI = "cs.SI"
    CS_SY = "cs.SY"

    # Economics
    ECON_EM = "econ.EM"
    ECON_GN = "econ.GN"
    ECON_TH = "econ.TH"

    # Electrical Engineering and Systems Science
    EESS_AS = "eess.AS"
    EESS_IV = "eess.IV"
    EESS_SP = "eess.SP"
    EESS_SY = "eess.SY"

    # Mathematics
    MATH_AC = "math.AC"
    MATH_AG = "math.AG"
    MATH_AP = "math.AP"
    MATH_AT = "math.AT"
    MATH_CA = "math.CA"
    MATH_CO = "math.CO"
    MATH_CT = "math.CT"
    MATH_CV = "math.CV"
    MATH_DG = "math.DG"
    MATH_DS = "math.DS"
    MATH_FA = "math.FA"
    MATH_GM = "math.GM"
    MATH_GN = "math.GN"
    MATH_GR = "math.GR"
    MATH_GT = "math.GT"
    MATH_HO = "math.HO"
    MATH_IT = "math.IT"
    MATH_KT = "math.KT"
    MATH_LO = "math.LO"
    MATH_MG = "math.MG"
    MATH_MP = "math.MP"
    MATH_NA = "math.NA"
    MATH_NT = "math.NT"
    MATH_OA = "math.OA"
    MATH_OC = "math.OC"
    MATH_PR = "math.PR"
    MATH_QA = "math.QA"
    MATH_RA = "math.RA"
    MATH_RT = "math.RT"
    MATH_SG = "math.SG"
    MATH_SP = "math.SP"
    MATH_ST = "math.ST"

    # Physics - Astrophysics
    ASTRO_PH = "astro-ph"
    ASTRO_PH_CO = "astro-ph.CO"
    ASTRO_PH_EP = "astro-ph.EP"
    ASTRO_PH_GA = "astro-ph.GA"
    ASTRO_PH_HE = "astro-ph.HE"
    ASTRO_PH_IM = "astro-ph.IM"
    ASTRO_PH_SR = "astro-ph.SR"

    # Physics - Condensed Matter
    COND_MAT = "cond-mat"
    COND_MAT_DIS_NN = "cond-mat.dis-nn"
    COND_MAT_MES_HALL = "cond-mat.mes-hall"
    COND_MAT_MTRL_SCI = "cond-mat.mtrl-sci"
    COND_MAT_OTHER = "cond-mat.other"
    COND_MAT_QUANT_GAS = "cond-mat.quant-gas"
    COND_MAT_SOFT = "cond-mat.soft"
    COND_MAT_STAT_MECH = "cond-mat.stat-mech"
    COND_MAT_STR_EL = "cond-mat.str-el"
    COND_MAT_SUPR_CON = "cond-mat.supr-con"

    # Physics - General Relativity and Quantum Cosmology
    GR_QC = "gr-qc"

    # Physics - High Energy Physics
    HEP_EX = "hep-ex"
    HEP_LAT = "hep-lat"
    HEP_PH = "hep-ph"
    HEP_TH = "hep-th"

    # Physics - Mathematical Physics
    MATH_PH = "math-ph"

    # Physics - Nonlinear Sciences
    NLIN_AO = "nlin.AO"
    NLIN_CD = "nlin.CD"
    NLIN_CG = "nlin.CG"
    NLIN_PS = "nlin.PS"
    NLIN_SI = "nlin.SI"

    # Physics - Nuclear Physics
    NUCL_EX = "nucl-ex"
    NUCL_TH = "nucl-th"

    # Physics - General Physics
    PHYSICS_ACC_PH = "physics.acc-ph"
    PHYSICS_AO_PH = "physics.ao-ph"
    PHYSICS_APP_PH = "physics.app-ph"
    PHYSICS_ATM_CLUS = "physics.atm-clus"
    PHYSICS_ATOM_PH = "physics.atom-ph"
    PHYSICS_BIO_PH = "physics.bio-ph"
    PHYSICS_CHEM_PH = "physics.chem-ph"
    PHYSICS_CLASS_PH = "physics.class-ph"
    PHYSICS_COMP_PH = "physics.comp-ph"
    PHYSICS_DATA_AN = "physics.data-an"
    PHYSICS_ED_PH = "physics.ed-ph"
    PHYSICS_FLU_DYN = "physics.flu-dyn"
    PHYSICS_GEN_PH = "physics.gen-ph"
    PHYSICS_GEO_PH = "physics.geo-ph"
    PHYSICS_HIST_PH = "physics.hist-ph"
    PHYSICS_INS_DET = "physics.ins-det"
    PHYSICS_MED_PH = "physics.med-ph"
    PHYSICS_OPTICS = "physics.optics"
    PHYSICS_PLASM_PH = "physics.plasm-ph"
    PHYSICS_POP_PH = "physics.pop-ph"
    PHYSICS_SOC_PH = "physics.soc-ph"
    PHYSICS_SPACE_PH = "physics.space-ph"

    # Physics - Quantum Physics
    QUANT_PH = "quant-ph"

    # Quantitative Biology
    Q_BIO_BM = "q-bio.BM"
    Q_BIO_CB = "q-bio.CB"
    Q_BIO_GN = "q-bio.GN"
    Q_BIO_MN = "q-bio.MN"
    Q_BIO_NC = "q-bio.NC"
    Q_BIO_OT = "q-bio.OT"
    Q_BIO_PE = "q-bio.PE"
    Q_BIO_QM = "q-bio.QM"
    Q_BIO_SC = "q-bio.SC"
    Q_BIO_TO = "q-bio.TO"

    # Quantitative Finance
    Q_FIN_CP = "q-fin.CP"
    Q_FIN_EC = "q-fin.EC"
    Q_FIN_GN = "q-fin.GN"
    Q_FIN_MF = "q-fin.MF"
    Q_FIN_PM = "q-fin.PM"
    Q_FIN_PR = "q-fin.PR"
    Q_FIN_RM = "q-fin.RM"
    Q_FIN_ST = "q-fin.ST"
    Q_FIN_TR = "q-fin.TR"

    # Statistics
    STAT_AP = "stat.AP"
    STAT_CO = "stat.CO"
    STAT_ME = "stat.ME"
    STAT_ML = "stat.ML"
    STAT_OT = "stat.OT"
    STAT_TH = "stat.TH"


class SortCriterion(_StrValueEnum):
    """Field by which search results are sorted."""

    RELEVANCE = "relevance"
    LAST_UPDATED_DATE = "lastUpdatedDate"
    SUBMITTED_DATE = "submittedDate"


class SortOrder(_StrValueEnum):
    """Direction in which search results are sorted."""

    ASCENDING = "ascending"
    DESCENDING = "descending"