"""JSON-RPC method names."""


class RPCMethods:
    """Wire names of every method the API issues."""

    # web3
    web3_client_version = "web3_clientVersion"
    web3_sha3 = "web3_sha3"

    # net
    net_version = "net_version"
    net_listening = "net_listening"
    net_peer_count = "net_peerCount"

    # eth
    protocol_version = "eth_protocolVersion"
    syncing = "eth_syncing"
    coinbase = "eth_coinbase"
    mining = "eth_mining"
    hashrate = "eth_hashrate"
    gas_price = "eth_gasPrice"
    accounts = "eth_accounts"
    block_number = "eth_blockNumber"
    get_balance = "eth_getBalance"
    get_storage_at = "eth_getStorageAt"
    get_transaction_count = "eth_getTransactionCount"
    get_block_transaction_count_by_hash = "eth_getBlockTransactionCountByHash"
    get_block_transaction_count_by_number = "eth_getBlockTransactionCountByNumber"
    get_uncle_count_by_block_hash = "eth_getUncleCountByBlockHash"
    get_uncle_count_by_block_number = "eth_getUncleCountByBlockNumber"
    get_code = "eth_getCode"
    sign = "eth_sign"
    send_transaction = "eth_sendTransaction"
    send_raw_transaction = "eth_sendRawTransaction"
    call = "eth_call"
    estimate_gas = "eth_estimateGas"
    get_block_by_hash = "eth_getBlockByHash"
    get_block_by_number = "eth_getBlockByNumber"
    get_transaction_by_hash = "eth_getTransactionByHash"
    get_transaction_by_block_hash_and_index = "eth_getTransactionByBlockHashAndIndex"
    get_transaction_by_block_number_and_index = "eth_getTransactionByBlockNumberAndIndex"
    get_transaction_receipt = "eth_getTransactionReceipt"
    get_uncle_by_block_hash_and_index = "eth_getUncleByBlockHashAndIndex"
    get_uncle_by_block_number_and_index = "eth_getUncleByBlockNumberAndIndex"
    new_filter = "eth_newFilter"
    new_block_filter = "eth_newBlockFilter"
    new_pending_transaction_filter = "eth_newPendingTransactionFilter"
    uninstall_filter = "eth_uninstallFilter"
    get_filter_changes = "eth_getFilterChanges"
    get_filter_logs = "eth_getFilterLogs"
    get_logs = "eth_getLogs"
    get_work = "eth_getWork"
    submit_work = "eth_submitWork"
    submit_hashrate = "eth_submitHashrate"

    # shh
    shh_version = "shh_version"
    shh_post = "shh_post"
