"""Typed request and response shapes for the OpenOcean API."""

from openocean.models.base import (
    ApiResponse,
    CodeResponse,
    Envelope,
    LogicalFailure,
    MsgResponse,
    OpenOceanModel,
    Outcome,
    Success,
)
from openocean.models.dca import (
    DcaCancelParams,
    DcaCreateParams,
    DcaOrder,
    DcaOrderData,
    DcaOrderFill,
    DcaOrderFillsResponse,
    DcaOrdersResponse,
)
from openocean.models.gasless import (
    GaslessQuoteData,
    GaslessQuoteParams,
    GaslessQuoteResponse,
    GaslessSwapParams,
    GaslessSwapResponse,
    OrderStatusData,
    OrderStatusResponse,
    QuoteFee,
)
from openocean.models.limit_order import (
    CancelLimitOrderData,
    CancelLimitOrderParams,
    CancelLimitOrderResponse,
    CreateLimitOrderParams,
    CreateLimitOrderResponse,
    LimitOrder,
    LimitOrderData,
    LimitOrdersQuery,
    LimitOrdersResponse,
)
from openocean.models.sweep_swap import (
    MultiSwapQuoteParams,
    MultiSwapQuoteResponse,
    SweepInToken,
    SweepLeg,
    SweepOutToken,
    SweepToken,
)
from openocean.models.swap import (
    DecodeInputDataResponse,
    Dex,
    DexListResponse,
    Eip1559Gas,
    GasPriceData,
    GasPriceResponse,
    GasResponse,
    GasTiers,
    QuoteData,
    QuoteDex,
    QuoteParams,
    QuotePath,
    QuoteResponse,
    QuoteRoute,
    QuoteSubRoute,
    QuoteSubRouteDex,
    QuoteToken,
    ReverseQuoteParams,
    ReverseQuoteResponse,
    SwapQuoteData,
    SwapQuoteParams,
    SwapQuoteResponse,
    Token,
    TokenListResponse,
    TransactionData,
    TransactionResponse,
)
from openocean.models.ticket import (
    SubmitTicketData,
    SubmitTicketParams,
    SubmitTicketResponse,
    TicketData,
    TicketError,
    TicketQuote,
    TicketResponse,
    TicketTransaction,
)
from openocean.models.zap import (
    BuildRouteData,
    BuildRouteParams,
    BuildRouteResponse,
    Pool,
    PoolToken,
    ZapAction,
    ZapActionData,
    ZapDetails,
    ZapPermit,
    ZapRouteData,
    ZapRouteParams,
    ZapRouteResponse,
    ZapTokenAmount,
)
