"""vecrand: per-worker random sampling for simulations and ray tracing."""

__version__ = "0.1.0"

from vecrand.core.entropy import EntropySource as EntropySource
from vecrand.core.entropy import ProcessEntropy as ProcessEntropy
from vecrand.core.entropy import default_entropy as default_entropy
from vecrand.core.pool import run_per_worker as run_per_worker
from vecrand.core.pool import spawn_samplers as spawn_samplers
from vecrand.core.rng import SeedPair as SeedPair
from vecrand.core.rng import derive_seed_pair as derive_seed_pair
from vecrand.core.rng import make_rng as make_rng
from vecrand.core.sampler import Sampler as Sampler
