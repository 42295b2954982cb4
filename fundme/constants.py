from decimal import Decimal
from pathlib import Path

import fundme

#
# Filesystem
#

FUNDME_DIR = Path(fundme.__file__).parent
CONSTRUCTOR_PARAMS_DIR = FUNDME_DIR / "constructor_params"
ARTIFACTS_DIR = FUNDME_DIR / "artifacts"

#
# Networks
#

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]
SEPOLIA_CHAIN_ID = 11155111
ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"

# Blocks to wait past inclusion before submitting source verification
VERIFICATION_CONFIRMATIONS = 5

#
# Contracts
#

FUNDME_CONTRACT_NAME = "FundMe"
LOCK_TIME_PARAMETER = "_lockTime"

#
# Pipeline
#

ALL_TAG = "all"
FUNDME_TAG = "fundme"
FUNDME_TAGS = (ALL_TAG, FUNDME_TAG)

#
# Entrypoint parameters; each entrypoint is tuned independently.
#

# scripts/deploy_fundme.py
DEPLOY_LOCK_TIME = 300

# scripts/deploy_pipeline.py reads its lock time from constructor_params/<network>/fundme.yml
PIPELINE_PARAMS_FILENAME = "fundme.yml"

# scripts/deploy_and_interact.py
DEPLOY_AND_INTERACT_LOCK_TIME = 300
DEPLOY_AND_INTERACT_AMOUNT = Decimal("0.5")

# scripts/interact_fundme.py
ATTACH_AMOUNT = Decimal("0.05")

SIGNER_LABELS = ("first", "second", "third", "fourth", "fifth")
