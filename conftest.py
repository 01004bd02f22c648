from dataclasses import dataclass
from pytest import fixture
import boto3
from boto3 import session
from moto import mock_aws

from iamarn.arn import parse_arn

@fixture(autouse=True)
def aws_environment(monkeypatch):
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')
    monkeypatch.delenv('AWS_PROFILE', raising=False)

@fixture
def role_arn():
    return parse_arn('arn:aws:iam::123456789012:role/test_role')

@fixture
def role_with_path_arn():
    return parse_arn('arn:aws:iam::123456789012:role/service/test_role')

@fixture
def session_arn():
    return parse_arn('arn:aws:sts::123456789012:assumed-role/test_role/test_session')

@fixture
def user_arn():
    return parse_arn('arn:aws:iam::123456789012:user/test_user')

@dataclass
class SessionWrapper:
    userid: str
    arn: str
    test_object: session.Session

@fixture
def role_session():
    with mock_aws():
        client = boto3.client('sts')
        response = client.assume_role(
            RoleArn='arn:aws:iam::123456789012:role/test_role',
            RoleSessionName='test_session',
        )
        yield SessionWrapper(
            userid=response['AssumedRoleUser']['AssumedRoleId'],
            arn=response['AssumedRoleUser']['Arn'],
            test_object=session.Session(
                aws_access_key_id=response['Credentials']['AccessKeyId'],
                aws_secret_access_key=response['Credentials']['SecretAccessKey'],
                aws_session_token=response['Credentials']['SessionToken'],
                region_name='us-east-1'),
        )

@fixture
def user_session():
    with mock_aws():
        iamclient = boto3.client('iam')
        user = iamclient.create_user(UserName='test_user')
        use_key = iamclient.create_access_key(UserName='test_user')
        yield SessionWrapper(
            userid=user['User']['UserId'],
            arn=user['User']['Arn'],
            test_object=session.Session(
                aws_access_key_id=use_key['AccessKey']['AccessKeyId'],
                aws_secret_access_key=use_key['AccessKey']['SecretAccessKey'],
                region_name='us-east-1'),
        )

@fixture
def arn_file(tmp_path):
    path = tmp_path / 'arns.txt'
    path.write_text('\n'.join([
        'arn:aws:sts::123456789012:assumed-role/test_role/test_session',
        '',
        'arn:aws:iam::123456789012:role/path/to/test_role',
        'arn:aws:iam::123456789012:user/test_user',
    ]) + '\n', encoding='utf-16')
    return path
