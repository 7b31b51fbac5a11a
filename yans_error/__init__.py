from .errors import InvalidInputError
from .modes import (
	ModulationClass,
	CodeRate,
	WifiMode,
	default_mode_table,
	get_mode,
)
from .tx_params import SU_STA_ID, PpduField, TxParameters
from .spectrum import (
	CodeCoefficients,
	DISTANCE_SPECTRUM,
	lookup_coefficients,
	distance_spectrum_table,
	distance_spectrum_rows,
)
from .ber import eb_no, bpsk_ber, qam_ber, raw_ber
from .fec import (
	binomial,
	pairwise_error_probability,
	chunk_success_from_ber,
	fec_bpsk_success,
	fec_qam_success,
)
from .config import (
	EstimatorConfig,
	DEFAULT_CONFIG,
	parse_config_text,
	load_config_from_text_file,
)
from .chunk import (
	Modeled,
	Unmodeled,
	ChunkSuccess,
	effective_phy_rate_bps,
	estimate_chunk_success_probability,
	chunk_success_rate,
	calculate_snr,
)
from .sweep import (
	SweepScenario,
	SweepRow,
	run_sweep,
	save_sweep_csv,
	render_success_curves,
)

__all__ = [
	"InvalidInputError",
	"ModulationClass",
	"CodeRate",
	"WifiMode",
	"default_mode_table",
	"get_mode",
	"SU_STA_ID",
	"PpduField",
	"TxParameters",
	"CodeCoefficients",
	"DISTANCE_SPECTRUM",
	"lookup_coefficients",
	"distance_spectrum_table",
	"distance_spectrum_rows",
	"eb_no",
	"bpsk_ber",
	"qam_ber",
	"raw_ber",
	"binomial",
	"pairwise_error_probability",
	"chunk_success_from_ber",
	"fec_bpsk_success",
	"fec_qam_success",
	"EstimatorConfig",
	"DEFAULT_CONFIG",
	"parse_config_text",
	"load_config_from_text_file",
	"Modeled",
	"Unmodeled",
	"ChunkSuccess",
	"effective_phy_rate_bps",
	"estimate_chunk_success_probability",
	"chunk_success_rate",
	"calculate_snr",
	"SweepScenario",
	"SweepRow",
	"run_sweep",
	"save_sweep_csv",
	"render_success_curves",
]
