from .proxy import Account, RealAccount, ClientConsole, ProxyAccount
