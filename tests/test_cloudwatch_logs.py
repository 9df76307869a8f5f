"""
Tests for reading CloudWatch log events and resolving the latest stream.
"""
import time
import pytest
import boto3
from unittest.mock import Mock, patch
import sdk_calls
from services.cloudwatch_logs_service import CloudWatchLogsService

REGION = 'us-east-1'
LOG_GROUP = '/aws/lambda/e2e-function'


def _now_ms():
    return int(time.time() * 1000)


@pytest.fixture
def log_group(aws):
    logs = boto3.client('logs', region_name=REGION)
    logs.create_log_group(logGroupName=LOG_GROUP)
    return logs


def _write_stream(logs, stream_name, message, timestamp):
    logs.create_log_stream(logGroupName=LOG_GROUP, logStreamName=stream_name)
    logs.put_log_events(
        logGroupName=LOG_GROUP,
        logStreamName=stream_name,
        logEvents=[{'timestamp': timestamp, 'message': message}]
    )


@pytest.mark.cloudwatch_logs
@pytest.mark.asyncio
async def test_no_streams_returns_empty_list(log_group):
    assert await sdk_calls.get_cloudwatch_logs(REGION, LOG_GROUP) == []


@pytest.mark.cloudwatch_logs
@pytest.mark.asyncio
async def test_reads_latest_stream_by_name(log_group):
    now = _now_ms()
    # Newest name carries the oldest event, as when lastEventTimestamp lags
    _write_stream(log_group, '2024/01/01/[$LATEST]aaa', 'first invocation', now)
    _write_stream(log_group, '2024/01/02/[$LATEST]bbb', 'second invocation', now - 60000)

    events = await sdk_calls.get_cloudwatch_logs(REGION, LOG_GROUP)

    assert [e['message'] for e in events] == ['second invocation']


@pytest.mark.cloudwatch_logs
@pytest.mark.asyncio
async def test_reads_named_stream(log_group):
    now = _now_ms()
    _write_stream(log_group, '2024-01-01-older', 'first invocation', now - 60000)
    _write_stream(log_group, '2024-01-02-newer', 'second invocation', now)

    events = await sdk_calls.get_cloudwatch_logs(REGION, LOG_GROUP, '2024-01-01-older')

    assert [e['message'] for e in events] == ['first invocation']


@pytest.mark.cloudwatch_logs
class TestStreamResolution:
    """Call-shape tests for CloudWatchLogsService."""

    @pytest.mark.asyncio
    @patch('services.base.boto3')
    async def test_named_stream_skips_discovery(self, mock_boto3):
        mock_client = Mock()
        mock_client.get_log_events.return_value = {'events': [{'message': 'hi'}]}
        mock_boto3.client.return_value = mock_client

        events = await CloudWatchLogsService(REGION).get_log_events(LOG_GROUP, 'stream-a')

        assert events == [{'message': 'hi'}]
        mock_client.describe_log_streams.assert_not_called()
        mock_client.get_log_events.assert_called_once_with(
            logGroupName=LOG_GROUP,
            logStreamName='stream-a'
        )

    @pytest.mark.asyncio
    @patch('services.base.boto3')
    async def test_discovery_orders_by_name_descending(self, mock_boto3):
        mock_client = Mock()
        mock_client.describe_log_streams.return_value = {
            'logStreams': [{'logStreamName': 'latest'}, {'logStreamName': 'older'}]
        }
        mock_client.get_log_events.return_value = {'events': []}
        mock_boto3.client.return_value = mock_client

        await CloudWatchLogsService(REGION).get_log_events(LOG_GROUP)

        mock_client.describe_log_streams.assert_called_once_with(
            logGroupName=LOG_GROUP,
            descending=True
        )
        mock_client.get_log_events.assert_called_once_with(
            logGroupName=LOG_GROUP,
            logStreamName='latest'
        )

    @pytest.mark.asyncio
    @patch('services.base.boto3')
    async def test_missing_stream_list_returns_empty(self, mock_boto3):
        mock_client = Mock()
        mock_client.describe_log_streams.return_value = {}
        mock_boto3.client.return_value = mock_client

        assert await CloudWatchLogsService(REGION).get_log_events(LOG_GROUP) == []
        mock_client.get_log_events.assert_not_called()

    @pytest.mark.asyncio
    @patch('services.base.boto3')
    async def test_missing_events_key_returns_empty(self, mock_boto3):
        mock_client = Mock()
        mock_client.get_log_events.return_value = {'nextForwardToken': 'f/1'}
        mock_boto3.client.return_value = mock_client

        assert await CloudWatchLogsService(REGION).get_log_events(LOG_GROUP, 's') == []
