from fundme.constants import FUNDME_CONTRACT_NAME, FUNDME_TAGS
from fundme.params import ContractHandle, Deployer
from fundme.pipeline import PIPELINE
from fundme.utils import get_contract_container
from fundme.workflows import deploy_and_verify


@PIPELINE.step(FUNDME_CONTRACT_NAME, tags=FUNDME_TAGS)
def deploy_fund_me(deployer: Deployer, provider, explorer) -> ContractHandle:
    container = get_contract_container(FUNDME_CONTRACT_NAME)
    handle, _ = deploy_and_verify(
        deployer=deployer, container=container, provider=provider, explorer=explorer
    )
    return handle
