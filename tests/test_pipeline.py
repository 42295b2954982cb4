import pytest

from fundme import steps
from fundme.constants import FUNDME_CONTRACT_NAME
from fundme.pipeline import PIPELINE, DeploymentPipeline
from fundme.utils import DeploymentConfigError
from fundme.workflows import lock_time_params
from tests.conftest import lock_time_of


@pytest.fixture
def pipeline(fund_me_container):
    pipeline = DeploymentPipeline()

    @pipeline.step("FundMe", tags=("all", "fundme"))
    def deploy_fund_me(deployer, provider, explorer):
        return deployer.deploy(fund_me_container, lock_time_params(180))

    @pipeline.step("Other", tags=("all", "other"))
    def deploy_other(deployer, provider, explorer):
        return deployer.deploy(fund_me_container, lock_time_params(60))

    return pipeline


def test_fund_me_step_is_registered():
    assert PIPELINE.tags >= {"all", "fundme"}
    selected = PIPELINE.select(["fundme"])
    assert [step.name for step in selected] == [FUNDME_CONTRACT_NAME]
    assert selected[0].tags == frozenset({"all", "fundme"})
    assert selected[0].func is steps.deploy_fund_me


def test_select_by_tag(pipeline):
    assert [step.name for step in pipeline.select(["fundme"])] == ["FundMe"]
    assert [step.name for step in pipeline.select(["all"])] == ["FundMe", "Other"]
    assert [step.name for step in pipeline.select(["other", "fundme"])] == ["FundMe", "Other"]


def test_unknown_tag(pipeline):
    with pytest.raises(DeploymentConfigError, match="Unknown deployment tags"):
        pipeline.select(["nope"])


def test_duplicate_step(pipeline):
    with pytest.raises(DeploymentConfigError):
        pipeline.step("FundMe", tags=("all",))(lambda **kwargs: None)


def test_run_in_order(provider, pipeline, deployer):
    handles = pipeline.run(tags=["all"], deployer=deployer, provider=provider, explorer=None)

    assert [lock_time_of(provider, handle) for handle in handles] == [180, 60]
    assert handles[0].receipt.block_number < handles[1].receipt.block_number
    handles = pipeline.run(tags=["fundme"], deployer=deployer, provider=provider, explorer=None)
    assert [lock_time_of(provider, handle) for handle in handles] == [180]
